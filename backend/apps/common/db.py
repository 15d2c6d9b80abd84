from contextlib import contextmanager
from typing import Iterator, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, OperationalError, connections, transaction

from .logger import get_logger
from .repository import StoreTimeoutError

logger = get_logger(__name__).bind(component="common", layer="db")

# SQLSTATE raised by PostgreSQL when statement_timeout cancels a query.
QUERY_CANCELED = "57014"


def store_timeout_seconds() -> float:
    return float(getattr(settings, "STORE_TIMEOUT_SECONDS", 3))


def is_timeout_error(exc: OperationalError) -> bool:
    cause = exc.__cause__
    code = getattr(cause, "pgcode", None) or getattr(cause, "sqlstate", None)
    if code == QUERY_CANCELED:
        return True
    # SQLite reports an expired busy timeout this way.
    return "database is locked" in str(exc).lower()


@contextmanager
def bounded_statement(
    using: str = DEFAULT_DB_ALIAS, timeout: Optional[float] = None
) -> Iterator:
    """
    Run the enclosed repository call in one transaction with a deadline.

    PostgreSQL gets a transaction scoped ``statement_timeout``; SQLite relies on
    the busy timeout configured in ``DATABASES`` from the same setting. An
    expired deadline surfaces as ``StoreTimeoutError``; nothing is retried.
    """
    seconds = store_timeout_seconds() if timeout is None else timeout
    connection = connections[using]
    try:
        with transaction.atomic(using=using):
            if connection.vendor == "postgresql":
                with connection.cursor() as cursor:
                    cursor.execute(
                        f"SET LOCAL statement_timeout = {int(seconds * 1000)}"
                    )
            yield connection
    except OperationalError as exc:
        if not is_timeout_error(exc):
            raise
        logger.warning(
            "Store call exceeded deadline",
            alias=using,
            timeout_seconds=seconds,
            error=str(exc),
        )
        raise StoreTimeoutError(
            f"store call exceeded {seconds:g}s deadline"
        ) from exc


SQL_BACKEND = "sql"
MEMORY_BACKEND = "memory"
STORE_BACKENDS = (SQL_BACKEND, MEMORY_BACKEND)


def store_backend() -> str:
    """Repository backend picked at startup from ``settings.STORE_BACKEND``."""
    backend = str(getattr(settings, "STORE_BACKEND", SQL_BACKEND)).strip().lower()
    if backend not in STORE_BACKENDS:
        raise ImproperlyConfigured(
            f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got {backend!r}"
        )
    return backend
