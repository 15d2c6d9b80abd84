from dataclasses import replace
from typing import Optional

from django.db import DEFAULT_DB_ALIAS

from apps.common.db import bounded_statement
from apps.common.repository import MemoryTable
from .dtos import CartDTO, CartItemDTO
from .mappers import CartMapper
from .models import CartItem


class InMemoryCartRepository:
    """Carts keyed by user id; every call holds the table lock."""

    def __init__(self, table: Optional[MemoryTable[CartDTO]] = None):
        self.table: MemoryTable[CartDTO] = table if table is not None else MemoryTable()

    def add_item(self, user_id: int, item: CartItemDTO) -> None:
        with self.table.lock:
            cart = self.table.rows.get(user_id)
            if cart is None:
                cart = CartDTO(user_id=user_id)
                self.table.rows[user_id] = cart
            for existing in cart.items:
                if existing.product_id == item.product_id:
                    existing.quantity += item.quantity
                    return
            cart.items.append(replace(item))

    def get_cart(self, user_id: int) -> CartDTO:
        with self.table.lock:
            cart = self.table.rows.get(user_id)
            return cart.copy() if cart is not None else CartDTO(user_id=user_id)

    def clear_cart(self, user_id: int) -> None:
        with self.table.lock:
            self.table.rows.pop(user_id, None)

    def take_cart(self, user_id: int) -> CartDTO:
        with self.table.lock:
            cart = self.table.rows.pop(user_id, None)
            return cart if cart is not None else CartDTO(user_id=user_id)


class SqlCartRepository:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.model = CartItem
        self.using = using

    def _queryset(self):
        return self.model.objects.using(self.using)

    def _upsert_sql(self, connection) -> str:
        table = connection.ops.quote_name(self.model._meta.db_table)
        # Adds to the stored quantity; the stored unit price is left untouched
        return (
            f"INSERT INTO {table} (user_id, product_id, quantity, price) "
            f"VALUES (%s, %s, %s, %s) "
            f"ON CONFLICT (user_id, product_id) "
            f"DO UPDATE SET quantity = {table}.quantity + excluded.quantity"
        )

    def add_item(self, user_id: int, item: CartItemDTO) -> None:
        with bounded_statement(self.using) as connection:
            with connection.cursor() as cursor:
                cursor.execute(
                    self._upsert_sql(connection),
                    [user_id, item.product_id, item.quantity, item.price],
                )

    def get_cart(self, user_id: int) -> CartDTO:
        with bounded_statement(self.using):
            items = list(self._queryset().filter(user_id=user_id).order_by("id"))
        return CartMapper.to_dto(user_id, items)

    def clear_cart(self, user_id: int) -> None:
        with bounded_statement(self.using):
            self._queryset().filter(user_id=user_id).delete()

    def take_cart(self, user_id: int) -> CartDTO:
        with bounded_statement(self.using):
            items = list(
                self._queryset()
                .select_for_update()
                .filter(user_id=user_id)
                .order_by("id")
            )
            if items:
                # Only the rows read above; a row inserted meanwhile survives
                self._queryset().filter(id__in=[i.id for i in items]).delete()
        return CartMapper.to_dto(user_id, items)
