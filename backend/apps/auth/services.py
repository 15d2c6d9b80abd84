from __future__ import annotations

from typing import Any, Dict

from apps.common import get_logger
from apps.common.repository import NotFoundError
from apps.users.dtos import UserDTO, without_password
from apps.users.protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="auth")


class InvalidLoginError(Exception):
    """Raised for every failed login; the cause is never disclosed."""

    def __init__(self):
        super().__init__("invalid email or password")


class RegistrationError(ValueError):
    """Raised when a registration payload is missing required credentials."""


class RegistrationService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="RegistrationService")

    def register(self, data: Dict[str, Any]) -> UserDTO:
        email = str(data.get("email") or "").strip()
        password = str(data.get("password") or "")
        name = str(data.get("name") or "").strip()
        self.logger.debug("Received registration request", email=email)
        if not email or not password:
            self.logger.info("Registration rejected: missing credentials", email=email)
            raise RegistrationError("email and password required")
        user = self.users.create(
            UserDTO(id=None, name=name, email=email, password=password)
        )
        self.logger.info("User registered successfully", user_id=user.id)
        return without_password(user)


class LoginService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="LoginService")

    def login(self, email: str, password: str) -> UserDTO:
        """
        Return the user owning ``email`` when ``password`` matches exactly.

        Unknown email and wrong password both raise ``InvalidLoginError``.
        """
        email = (email or "").strip()
        try:
            user = self.users.get_by_email(email)
        except NotFoundError:
            self.logger.info("Login rejected", email=email)
            raise InvalidLoginError() from None
        if not password or user.password != password:
            self.logger.info("Login rejected", email=email)
            raise InvalidLoginError()
        self.logger.info("User logged in", user_id=user.id)
        return without_password(user)
