from django.db import models


class User(models.Model):
    name = models.CharField(max_length=150, blank=True, default="")
    # Lookup key for login; the unique index backs the store level check
    email = models.EmailField(unique=True)
    # Plaintext by contract; never rendered by any serializer
    password = models.CharField(max_length=128)

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self):
        return self.email
