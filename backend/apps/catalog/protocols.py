from __future__ import annotations

from typing import List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.dtos import ProductDTO


class ProductRepositoryProtocol(Protocol):
    def create(self, product: "ProductDTO") -> "ProductDTO":
        ...

    def update(self, product: "ProductDTO") -> "ProductDTO":
        ...

    def delete(self, product_id: int) -> None:
        ...

    def list_all(self) -> List["ProductDTO"]:
        ...

    def get_by_id(self, product_id: int) -> "ProductDTO":
        ...
