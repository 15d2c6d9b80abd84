from __future__ import annotations

from apps.users.container import get_user_repository

from .services import LoginService, RegistrationService


def build_registration_service() -> RegistrationService:
    return RegistrationService(users=get_user_repository())


def build_login_service() -> LoginService:
    return LoginService(users=get_user_repository())
