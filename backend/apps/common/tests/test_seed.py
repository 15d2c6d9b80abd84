from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.catalog.models import Product
from apps.common.management.commands.seed_storefront import PRODUCTS, USERS
from apps.users.models import User


class SeedCommandTests(TestCase):
    def test_seed_creates_products_and_users(self):
        out = StringIO()
        call_command('seed_storefront', stdout=out)
        self.assertEqual(Product.objects.count(), len(PRODUCTS))
        self.assertEqual(User.objects.count(), len(USERS))
        self.assertIn(f'Seeded {len(PRODUCTS)} products', out.getvalue())

    def test_seed_is_idempotent(self):
        call_command('seed_storefront', stdout=StringIO())
        out = StringIO()
        call_command('seed_storefront', stdout=out)
        self.assertEqual(Product.objects.count(), len(PRODUCTS))
        self.assertEqual(User.objects.count(), len(USERS))
        self.assertIn('Seeded 0 products and 0 users', out.getvalue())
