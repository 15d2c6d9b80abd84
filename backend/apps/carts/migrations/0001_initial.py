from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CartItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("user_id", models.BigIntegerField(db_index=True)),
                ("product_id", models.BigIntegerField()),
                ("quantity", models.IntegerField()),
                ("price", models.FloatField()),
            ],
            options={
                "db_table": "cart_items",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="cartitem",
            constraint=models.UniqueConstraint(
                fields=("user_id", "product_id"), name="cart_item_user_product_uniq"
            ),
        ),
    ]
