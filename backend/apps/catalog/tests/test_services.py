import unittest
from unittest.mock import Mock

from apps.catalog.dtos import ProductDTO
from apps.catalog.repositories import InMemoryProductRepository
from apps.catalog.services import ProductService
from apps.common.repository import NotFoundError, StoreTimeoutError


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = InMemoryProductRepository()
        self.service = ProductService(self.repo)

    def _seed(self):
        self.service.create_product({"name": "Hammer", "price": 12, "category": "tools"})
        self.service.create_product({"name": "Apple", "price": 0.5, "category": "food"})
        self.service.create_product({"name": "Saw", "price": 20, "category": "tools"})

    def test_create_product_assigns_id(self):
        product = self.service.create_product({"name": " Pen ", "price": "1.25"})
        self.assertEqual(product, ProductDTO(id=1, name="Pen", price=1.25, category=""))

    def test_list_products_all(self):
        self._seed()
        self.assertEqual([p.name for p in self.service.list_products()], ["Hammer", "Apple", "Saw"])

    def test_list_products_filters_by_category(self):
        self._seed()
        names = [p.name for p in self.service.list_products(category="tools")]
        self.assertEqual(names, ["Hammer", "Saw"])

    def test_list_products_unknown_category_is_empty(self):
        self._seed()
        self.assertEqual(self.service.list_products(category="toys"), [])

    def test_partial_update_keeps_other_fields(self):
        self._seed()
        product = self.service.update_product(1, {"price": 15}, partial=True)
        self.assertEqual((product.name, product.price, product.category), ("Hammer", 15.0, "tools"))

    def test_full_update_resets_category(self):
        self._seed()
        product = self.service.update_product(1, {"name": "Mallet", "price": 9}, partial=False)
        self.assertEqual(product.category, "")
        self.assertEqual(self.repo.get_by_id(1).name, "Mallet")

    def test_update_unknown_product_raises(self):
        with self.assertRaises(NotFoundError):
            self.service.update_product(42, {"price": 1}, partial=True)

    def test_delete_product(self):
        self._seed()
        self.service.delete_product(2)
        with self.assertRaises(NotFoundError):
            self.service.get_product(2)

    def test_store_errors_propagate(self):
        repo = Mock()
        repo.list_all.side_effect = StoreTimeoutError("slow")
        with self.assertRaises(StoreTimeoutError):
            ProductService(repo).list_products()
