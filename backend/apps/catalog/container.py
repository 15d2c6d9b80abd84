from __future__ import annotations

from functools import lru_cache

from apps.common.db import MEMORY_BACKEND, store_backend

from .protocols import ProductRepositoryProtocol
from .repositories import InMemoryProductRepository, SqlProductRepository
from .services import ProductService


@lru_cache(maxsize=None)
def get_product_repository() -> ProductRepositoryProtocol:
    if store_backend() == MEMORY_BACKEND:
        return InMemoryProductRepository()
    return SqlProductRepository()


def build_product_service() -> ProductService:
    return ProductService(products=get_product_repository())
