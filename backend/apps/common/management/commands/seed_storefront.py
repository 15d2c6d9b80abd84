from django.core.management.base import BaseCommand

from apps.catalog.container import get_product_repository
from apps.catalog.dtos import ProductDTO
from apps.common.logger import get_logger
from apps.common.repository import AlreadyExistsError
from apps.users.container import get_user_repository
from apps.users.dtos import UserDTO

logger = get_logger(__name__).bind(component='common', layer='command')

PRODUCTS = [
    ("Fjallraven - Foldsack No. 1 Backpack", 109.95, "bags"),
    ("Mens Casual Premium Slim Fit T-Shirts", 22.30, "men's clothing"),
    ("Mens Cotton Jacket", 55.99, "men's clothing"),
    ("Solid Gold Petite Micropave", 168.00, "jewelery"),
    ("WD 2TB Elements Portable External Hard Drive", 64.00, "electronics"),
    ("Acer SB220Q 21.5 inch Full HD Monitor", 599.00, "electronics"),
    ("Womens Short Sleeve Moisture Tee", 7.95, "women's clothing"),
]

USERS = [
    ("John Doe", "john@example.com", "m38rmF$"),
    ("Kevin Ryan", "kevin@example.com", "kev02937@"),
]


class Command(BaseCommand):
    help = 'Seed demo products and users through the configured store backend.'

    def handle(self, *args, **options):
        products = get_product_repository()
        users = get_user_repository()

        existing = {p.name for p in products.list_all()}
        created_products = 0
        for name, price, category in PRODUCTS:
            if name in existing:
                continue
            products.create(ProductDTO(id=None, name=name, price=price, category=category))
            created_products += 1

        created_users = 0
        for name, email, password in USERS:
            try:
                users.create(UserDTO(id=None, name=name, email=email, password=password))
            except AlreadyExistsError:
                logger.debug('Seed user already present', email=email)
                continue
            created_users += 1

        logger.info('Seed completed', products=created_products, users=created_users)
        self.stdout.write(
            self.style.SUCCESS(
                f'Seeded {created_products} products and {created_users} users'
            )
        )
