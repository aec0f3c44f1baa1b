# accounting/tests/test_accounts_api.py

from __future__ import annotations

from unittest import mock

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from accounting.models.account import Account
from accounting.services.account_directory import AccountDirectory

ACCOUNTS_URL = "/api/accounts"


class AccountApiTests(TestCase):
    """
    GUARANTEES:
    - POST /api/accounts -> 201 with empty body
    - duplicate code -> 409 standard error body, never two rows
    - GET /api/accounts -> [{id, code, name}]
    """

    def setUp(self):
        self.client = APIClient()

    def test_create_account_returns_201_and_is_listed(self):
        res = self.client.post(ACCOUNTS_URL, {"code": "2000", "name": "TEST_ACCOUNT"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.content, b"")

        res = self.client.get(ACCOUNTS_URL)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        account = Account.objects.get(code="2000")
        self.assertIn({"id": account.id, "code": "2000", "name": "TEST_ACCOUNT"}, res.json())

    def test_duplicate_code_returns_409(self):
        body = {"code": "3000", "name": "DUPLICATE"}

        first = self.client.post(ACCOUNTS_URL, body, format="json")
        second = self.client.post(ACCOUNTS_URL, body, format="json")

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)
        payload = second.json()
        self.assertEqual(payload["status"], 409)
        self.assertEqual(payload["error"], "Conflict")
        self.assertEqual(payload["message"], "Already exists (unique constraint violated)")
        self.assertEqual(payload["path"], ACCOUNTS_URL)
        self.assertIn("timestamp", payload)
        self.assertEqual(Account.objects.filter(code="3000").count(), 1)

    def test_constraint_race_maps_to_same_conflict(self):
        # Both requests pass the pre-check; the unique constraint decides.
        Account.objects.create(code="3000", name="Winner")

        with mock.patch.object(AccountDirectory, "find_by_code", return_value=None):
            res = self.client.post(ACCOUNTS_URL, {"code": "3000", "name": "Loser"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.json()["message"], "Already exists (unique constraint violated)")
        self.assertEqual(Account.objects.filter(code="3000").count(), 1)

    def test_blank_code_returns_400(self):
        res = self.client.post(ACCOUNTS_URL, {"code": "  ", "name": "Blank"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(res.json()["message"].startswith("code:"))
        self.assertFalse(Account.objects.exists())

    def test_list_accounts_returns_array(self):
        res = self.client.get(ACCOUNTS_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res["Content-Type"], "application/json")
        self.assertEqual(res.json(), [])
