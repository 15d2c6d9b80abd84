from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField()
    category = serializers.CharField(allow_blank=True)


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    price = serializers.FloatField(min_value=0)
    category = serializers.CharField(
        max_length=100, required=False, allow_blank=True
    )
