from __future__ import annotations

from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO, CartItemDTO
    from apps.catalog.dtos import ProductDTO


class CartRepositoryProtocol(Protocol):
    def add_item(self, user_id: int, item: "CartItemDTO") -> None:
        ...

    def get_cart(self, user_id: int) -> "CartDTO":
        ...

    def clear_cart(self, user_id: int) -> None:
        ...

    def take_cart(self, user_id: int) -> "CartDTO":
        """Return the cart and empty it in one atomic step."""
        ...


class ProductLookupProtocol(Protocol):
    def get_by_id(self, product_id: int) -> "ProductDTO":
        ...
