from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, required=False)

    def validate_email(self, value: str) -> str:
        return value.strip()


class UserUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    email = serializers.EmailField(required=False)
    password = serializers.CharField(
        write_only=True, required=False, allow_blank=True, trim_whitespace=False
    )

    def validate(self, attrs):
        if not getattr(self, "partial", False) and "email" not in attrs:
            raise serializers.ValidationError({"email": "This field is required."})
        if "email" in attrs:
            attrs["email"] = attrs["email"].strip()
        return super().validate(attrs)
