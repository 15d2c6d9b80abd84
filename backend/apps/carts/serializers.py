from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField()
    price = serializers.FloatField()


class CartReadSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    items = CartItemSerializer(many=True)
    total = serializers.FloatField()


class CartItemWriteSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)


class CheckoutResponseSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    total = serializers.FloatField()
