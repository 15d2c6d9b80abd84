from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

from apps.common import get_logger
from .commands import ProductCreateCommand, ProductUpdateCommand
from .dtos import ProductDTO
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug("Listing products", category=category)
        products = self.products.list_all()
        if category:
            wanted = category.strip()
            products = [p for p in products if p.category == wanted]
        return products

    def get_product(self, product_id: int) -> ProductDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        return self.products.get_by_id(product_id)

    def create_product(self, data: Dict[str, Any]) -> ProductDTO:
        cmd = ProductCreateCommand.from_raw(data)
        self.logger.info("Creating product", name=cmd.name, category=cmd.category)
        product = self.products.create(
            ProductDTO(id=None, name=cmd.name, price=cmd.price, category=cmd.category)
        )
        self.logger.info("Product created", product_id=product.id)
        return product

    def update_product(
        self, product_id: int, data: Dict[str, Any], *, partial: bool
    ) -> ProductDTO:
        cmd = ProductUpdateCommand.from_raw(product_id, data, partial)
        self.logger.info("Updating product", product_id=product_id, partial=partial)
        current = self.products.get_by_id(product_id)
        product = self.products.update(replace(current, **cmd.changes()))
        self.logger.info("Product updated", product_id=product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        self.logger.info("Deleting product", product_id=product_id)
        self.products.delete(product_id)
        self.logger.info("Product deleted", product_id=product_id)
