from __future__ import annotations

from functools import lru_cache

from apps.catalog.container import get_product_repository
from apps.common.db import MEMORY_BACKEND, store_backend

from .protocols import CartRepositoryProtocol
from .repositories import InMemoryCartRepository, SqlCartRepository
from .services import CartService


@lru_cache(maxsize=None)
def get_cart_repository() -> CartRepositoryProtocol:
    if store_backend() == MEMORY_BACKEND:
        return InMemoryCartRepository()
    return SqlCartRepository()


def build_cart_service() -> CartService:
    return CartService(
        carts=get_cart_repository(),
        products=get_product_repository(),
    )
