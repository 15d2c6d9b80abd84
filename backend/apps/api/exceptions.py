from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.auth.services import InvalidLoginError
from apps.carts.services import EmptyCartError
from apps.common import get_logger
from apps.common.repository import (
    AlreadyExistsError,
    NotFoundError,
    StoreTimeoutError,
)

logger = get_logger(__name__).bind(component="api", layer="exception")


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central DRF exception handler producing the structured error body.

    Domain errors map to stable codes; anything unexpected becomes a 500 with
    a generic message so store internals never reach the client.
    """
    bound_logger = _bind_logger(context)

    domain = _from_domain_error(exc)
    if domain is not None:
        code, message, details = domain
        bound_logger.info("Handled domain error", code=code, error=exc.__class__.__name__)
        return error_response(code, message, details)

    if isinstance(exc, StoreTimeoutError):
        bound_logger.error("Store call timed out", error=str(exc))
        return error_response("SERVICE_UNAVAILABLE", "Service temporarily unavailable")

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        "Something went wrong",
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _from_domain_error(exc: Exception) -> Optional[Tuple[str, str, Optional[Dict[str, str]]]]:
    if isinstance(exc, NotFoundError):
        return ("NOT_FOUND", f"{exc.entity} not found", {"id": str(exc.key)})
    if isinstance(exc, AlreadyExistsError):
        return (
            "CONFLICT",
            f"{exc.entity} already exists",
            {exc.field_name: str(exc.value)},
        )
    if isinstance(exc, EmptyCartError):
        return ("EMPTY_CART", "Cart is empty", {"userId": str(exc.user_id)})
    if isinstance(exc, InvalidLoginError):
        return ("UNAUTHORIZED", "Invalid email or password", None)
    return None


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize_payload(exc, response.data, status_code)
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    return error_response(code, message, details, http_status=status_code)


def _normalize_django_validation_error(
    exc: DjangoValidationError,
) -> Union[Dict[str, Any], list]:
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    return list(exc.messages)


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, ValidationError):
        return ("VALIDATION_ERROR", "Validation failed", payload)
    if isinstance(exc, ParseError):
        return (
            "VALIDATION_ERROR",
            _extract_message(payload, "Malformed request", status_code),
            None,
        )
    if isinstance(exc, (NotFound, Http404)):
        return ("NOT_FOUND", _extract_message(payload, "Resource not found", status_code), None)
    if isinstance(exc, MethodNotAllowed):
        return (
            "METHOD_NOT_ALLOWED",
            _extract_message(payload, "Method not allowed", status_code),
            None,
        )
    if isinstance(exc, UnsupportedMediaType):
        return (
            "UNSUPPORTED_MEDIA_TYPE",
            _extract_message(payload, "Unsupported media type", status_code),
            None,
        )
    if status_code >= 500:
        return ("SERVER_ERROR", "Something went wrong", None)
    return ("UNKNOWN_ERROR", _extract_message(payload, "Request failed", status_code), None)


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return "Something went wrong"
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    return fallback


__all__ = ["global_exception_handler"]
