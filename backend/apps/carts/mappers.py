from typing import Iterable, List

from .dtos import CartDTO, CartItemDTO
from .models import CartItem


class CartItemMapper:
    @staticmethod
    def to_dto(item: CartItem) -> CartItemDTO:
        return CartItemDTO(
            product_id=item.product_id,
            quantity=item.quantity,
            price=float(item.price),
        )

    @staticmethod
    def many_to_dto(items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [CartItemMapper.to_dto(i) for i in items]


class CartMapper:
    @staticmethod
    def to_dto(user_id: int, items: Iterable[CartItem]) -> CartDTO:
        return CartDTO(user_id=user_id, items=CartItemMapper.many_to_dto(items))
