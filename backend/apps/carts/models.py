from django.db import models


class CartItem(models.Model):
    """
    One product line of a user's cart. A cart has no row of its own: it is the
    set of items sharing a ``user_id``.
    """

    # Plain references, not foreign keys: carts do not own users or products
    user_id = models.BigIntegerField(db_index=True)
    product_id = models.BigIntegerField()
    quantity = models.IntegerField()
    # Unit price captured when the item was first added
    price = models.FloatField()

    class Meta:
        db_table = "cart_items"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user_id", "product_id"], name="cart_item_user_product_uniq"
            ),
        ]

    def __str__(self):
        return f"CartItem {self.product_id} x{self.quantity} for {self.user_id}"
