from __future__ import annotations

from apps.common import get_logger
from .dtos import CartDTO, CartItemDTO, CartSummaryDTO, CheckoutDTO
from .protocols import CartRepositoryProtocol, ProductLookupProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class EmptyCartError(Exception):
    """Raised when checkout is attempted on a cart without items."""

    def __init__(self, user_id: int):
        super().__init__("cart is empty")
        self.user_id = user_id


def calculate_cart_total(cart: CartDTO) -> float:
    """Sum of unit price times quantity, accumulated in item order."""
    total = 0.0
    for item in cart.items:
        total += item.price * float(item.quantity)
    return total


class CartService:
    def __init__(
        self,
        carts: CartRepositoryProtocol,
        products: ProductLookupProtocol,
    ):
        self.carts = carts
        self.products = products
        self.logger = logger.bind(service="CartService")

    def get_cart(self, user_id: int) -> CartDTO:
        self.logger.debug("Fetching cart", user_id=user_id)
        return self.carts.get_cart(user_id)

    def summarize(self, cart: CartDTO) -> CartSummaryDTO:
        return CartSummaryDTO(
            user_id=cart.user_id,
            items=list(cart.items),
            total=calculate_cart_total(cart),
        )

    def add_item(self, user_id: int, product_id: int, quantity: int) -> CartDTO:
        """
        Add ``quantity`` of a catalog product to the user's cart.

        The unit price is copied from the product at this moment and is not
        refreshed later. Unknown products raise ``NotFoundError``.
        """
        product = self.products.get_by_id(product_id)
        self.logger.info(
            "Adding item to cart",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            price=product.price,
        )
        self.carts.add_item(
            user_id,
            CartItemDTO(product_id=product_id, quantity=quantity, price=product.price),
        )
        return self.carts.get_cart(user_id)

    def clear_cart(self, user_id: int) -> None:
        self.logger.info("Clearing cart", user_id=user_id)
        self.carts.clear_cart(user_id)

    def checkout(self, user_id: int) -> float:
        """
        Empty the user's cart and return what it was worth.

        Reading and clearing happen in a single store call, so an item added
        concurrently is either part of this checkout or stays in the cart.
        Store errors propagate unchanged; an empty cart raises
        ``EmptyCartError`` and nothing is modified.
        """
        self.logger.info("Checking out cart", user_id=user_id)
        cart = self.carts.take_cart(user_id)
        if not cart.items:
            self.logger.info("Checkout rejected: cart is empty", user_id=user_id)
            raise EmptyCartError(user_id)
        total = calculate_cart_total(cart)
        self.logger.info(
            "Cart checked out",
            user_id=user_id,
            items=len(cart.items),
            total=total,
        )
        return total

    def checkout_summary(self, user_id: int) -> CheckoutDTO:
        return CheckoutDTO(user_id=user_id, total=self.checkout(user_id))
