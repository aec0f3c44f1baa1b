# accounting/api/serializers/accounts.py

from rest_framework import serializers

from accounting.models.account import Account


class AccountSerializer(serializers.ModelSerializer):
    """
    Read-only serializer for listing accounts.
    Wire contract: id, code, name.
    """

    class Meta:
        model = Account
        fields = ("id", "code", "name")
        read_only_fields = fields


class AccountCreateSerializer(serializers.Serializer):
    """
    Input serializer (Swagger-visible).
    Uniqueness is NOT checked here; AccountDirectory.register owns it.
    """

    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=150)
