import pytest
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import global_exception_handler
from apps.auth.services import InvalidLoginError
from apps.carts.services import EmptyCartError
from apps.common.repository import AlreadyExistsError, NotFoundError, StoreTimeoutError

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


@pytest.mark.parametrize(
    "exc, expected_status, expected_code",
    [
        (NotFoundError("Product", 7), status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
        (AlreadyExistsError("User", "email", "a@b.c"), status.HTTP_409_CONFLICT, "CONFLICT"),
        (EmptyCartError(3), status.HTTP_409_CONFLICT, "EMPTY_CART"),
        (InvalidLoginError(), status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
        (StoreTimeoutError("slow"), status.HTTP_503_SERVICE_UNAVAILABLE, "SERVICE_UNAVAILABLE"),
    ],
)
def test_domain_errors_map_to_codes(exc, expected_status, expected_code):
    request = factory.get("/api/example/")
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == expected_status
    assert response.data["error"]["code"] == expected_code


def test_not_found_reports_key():
    request = factory.get("/api/example/")
    response = global_exception_handler(NotFoundError("Product", 7), _context(request))
    assert response.data["error"]["message"] == "Product not found"
    assert response.data["error"]["details"] == {"id": "7"}


def test_validation_error_preserves_details():
    request = factory.post("/api/example/", data={})
    exc = ValidationError({"field": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"field": ["This field is required."]}


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/example/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
