from __future__ import annotations

from functools import lru_cache

from apps.common.db import MEMORY_BACKEND, store_backend

from .protocols import UserRepositoryProtocol
from .repositories import InMemoryUserRepository, SqlUserRepository
from .services import UserService


@lru_cache(maxsize=None)
def get_user_repository() -> UserRepositoryProtocol:
    """One user store per process, shared by every view that needs it."""
    if store_backend() == MEMORY_BACKEND:
        return InMemoryUserRepository()
    return SqlUserRepository()


def build_user_service() -> UserService:
    return UserService(users=get_user_repository())
