# accounting/api/views/accounts.py

"""
PATH: accounting/api/views/accounts.py

ACCOUNTS API (MASTER DATA)

POST /api/accounts
    - Registers an account; 201 with no body
    - Duplicate code -> 409 (pre-check OR unique constraint, same outcome)

GET  /api/accounts
    - All accounts as [{id, code, name}]
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.api.serializers.accounts import (
    AccountCreateSerializer,
    AccountSerializer,
)
from accounting.services.account_directory import AccountDirectory


class AccountListCreateView(APIView):
    directory_class = AccountDirectory

    def get_directory(self) -> AccountDirectory:
        return self.directory_class()

    @extend_schema(
        tags=["accounts"],
        responses=AccountSerializer(many=True),
    )
    def get(self, request, *args, **kwargs):
        accounts = self.get_directory().list_all()
        return Response(AccountSerializer(accounts, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["accounts"],
        request=AccountCreateSerializer,
        responses={201: None, 400: dict, 409: dict},
    )
    def post(self, request, *args, **kwargs):
        s = AccountCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        self.get_directory().register(code=data["code"], name=data["name"])
        return Response(status=status.HTTP_201_CREATED)
