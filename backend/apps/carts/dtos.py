from dataclasses import dataclass, field, replace
from typing import List


@dataclass
class CartItemDTO:
    product_id: int
    quantity: int
    price: float


@dataclass
class CartDTO:
    user_id: int
    items: List[CartItemDTO] = field(default_factory=list)

    def copy(self) -> "CartDTO":
        return CartDTO(user_id=self.user_id, items=[replace(i) for i in self.items])


@dataclass
class CartSummaryDTO:
    user_id: int
    items: List[CartItemDTO]
    total: float


@dataclass
class CheckoutDTO:
    user_id: int
    total: float
