from dataclasses import replace
from typing import List, Optional

from django.db import DEFAULT_DB_ALIAS

from apps.common.db import bounded_statement
from apps.common.repository import InMemoryRepository, MemoryTable, NotFoundError
from .dtos import ProductDTO
from .mappers import ProductMapper
from .models import Product


class InMemoryProductRepository(InMemoryRepository[ProductDTO]):
    entity = "Product"

    def __init__(self, table: Optional[MemoryTable[ProductDTO]] = None):
        super().__init__(table)

    def create(self, product: ProductDTO) -> ProductDTO:
        return self._insert(product)

    def update(self, product: ProductDTO) -> ProductDTO:
        return self._replace(product)

    def delete(self, product_id: int) -> None:
        self._remove(product_id)

    def list_all(self) -> List[ProductDTO]:
        return self._all()

    def get_by_id(self, product_id: int) -> ProductDTO:
        return self._get(product_id)


class SqlProductRepository:
    entity = "Product"

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.model = Product
        self.using = using

    def _queryset(self):
        return self.model.objects.using(self.using)

    def create(self, product: ProductDTO) -> ProductDTO:
        with bounded_statement(self.using):
            row = self._queryset().create(
                name=product.name, price=product.price, category=product.category
            )
        return ProductMapper.to_dto(row)

    def update(self, product: ProductDTO) -> ProductDTO:
        with bounded_statement(self.using):
            updated = (
                self._queryset()
                .filter(id=product.id)
                .update(
                    name=product.name,
                    price=product.price,
                    category=product.category,
                )
            )
        if not updated:
            raise NotFoundError(self.entity, product.id)
        return replace(product)

    def delete(self, product_id: int) -> None:
        with bounded_statement(self.using):
            deleted, _ = self._queryset().filter(id=product_id).delete()
        if not deleted:
            raise NotFoundError(self.entity, product_id)

    def list_all(self) -> List[ProductDTO]:
        with bounded_statement(self.using):
            return ProductMapper.many_to_dto(self._queryset().order_by("id"))

    def get_by_id(self, product_id: int) -> ProductDTO:
        with bounded_statement(self.using):
            row = self._queryset().filter(id=product_id).first()
        if row is None:
            raise NotFoundError(self.entity, product_id)
        return ProductMapper.to_dto(row)
