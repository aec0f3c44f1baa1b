# accounting/tests/test_journal_entries_api.py

from __future__ import annotations

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from accounting.models.account import Account
from accounting.models.journal import JournalEntry
from accounting.models.line import JournalLine

ENTRIES_URL = "/api/journal-entries"


def _detail_url(entry_id) -> str:
    return f"{ENTRIES_URL}/{entry_id}"


class JournalEntryApiTests(TestCase):
    """
    End-to-end over HTTP (APIClient -> view -> service -> ORM).

    GUARANTEES:
    - create returns 201 {id}
    - imbalance -> 400, missing account -> 404, nothing persisted
    - detail / listing / PATCH follow the public wire contract
    """

    def setUp(self):
        self.client = APIClient()
        self.cash = Account.objects.create(code="1000", name="Cash")
        self.product = Account.objects.create(code="1111", name="Product")

    def _body(self, entry_date="2025-12-17", description="Buy product with cash", amount=10000):
        return {
            "entryDate": entry_date,
            "description": description,
            "lines": [
                {"dcType": "DEBIT", "amount": amount, "accountId": self.product.id},
                {"dcType": "CREDIT", "amount": amount, "accountId": self.cash.id},
            ],
        }

    def _create(self, **kwargs) -> int:
        res = self.client.post(ENTRIES_URL, self._body(**kwargs), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.content)
        return res.json()["id"]

    # =====================================================
    # CREATE
    # =====================================================

    def test_create_returns_201_and_id(self):
        res = self.client.post(ENTRIES_URL, self._body(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(set(res.json()), {"id"})
        self.assertGreater(res.json()["id"], 0)

    def test_debit_credit_mismatch_returns_400(self):
        body = self._body()
        body["lines"][1]["amount"] = 9000

        res = self.client.post(ENTRIES_URL, body, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["message"], "debit sum must equal credit sum")
        self.assertEqual(res.json()["error"], "Bad Request")
        self.assertEqual(res.json()["path"], ENTRIES_URL)
        self.assertEqual(self.client.get(ENTRIES_URL).json(), [])

    def test_missing_account_returns_404_and_persists_nothing(self):
        body = self._body()
        body["lines"][0]["accountId"] = 999

        res = self.client.post(ENTRIES_URL, body, format="json")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.json()["message"], "Account not found: 999")
        self.assertEqual(res.json()["path"], ENTRIES_URL)
        self.assertFalse(JournalEntry.objects.exists())
        self.assertFalse(JournalLine.objects.exists())

    def test_invalid_side_returns_400(self):
        body = self._body()
        body["lines"][0]["dcType"] = "debit"

        res = self.client.post(ENTRIES_URL, body, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["message"], "side must be DEBIT or CREDIT")

    def test_empty_lines_returns_400(self):
        body = self._body()
        body["lines"] = []

        res = self.client.post(ENTRIES_URL, body, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(res.json()["message"].startswith("lines:"))

    def test_amount_beyond_bigint_range_returns_400(self):
        res = self.client.post(ENTRIES_URL, self._body(amount=2**63), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(res.json()["message"].startswith("lines[0].amount:"))
        self.assertEqual(JournalEntry.objects.count(), 0)

    def test_missing_field_reports_first_violation(self):
        body = self._body()
        del body["lines"][1]["accountId"]

        res = self.client.post(ENTRIES_URL, body, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["message"], "lines[1].accountId: This field is required.")

    def test_unparseable_body_returns_400(self):
        res = self.client.post(ENTRIES_URL, data="{not json", content_type="application/json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["message"], "Invalid request body (JSON parse failed)")
        self.assertEqual(res.json()["status"], 400)

    # =====================================================
    # READ
    # =====================================================

    def test_detail_round_trip(self):
        entry_id = self._create()

        res = self.client.get(_detail_url(entry_id))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        data = res.json()
        self.assertEqual(data["id"], entry_id)
        self.assertEqual(data["entryDate"], "2025-12-17")
        self.assertEqual(data["description"], "Buy product with cash")
        self.assertCountEqual(
            data["lines"],
            [
                {
                    "dcType": "DEBIT",
                    "amount": 10000,
                    "accountId": self.product.id,
                    "accountCode": "1111",
                    "accountName": "Product",
                },
                {
                    "dcType": "CREDIT",
                    "amount": 10000,
                    "accountId": self.cash.id,
                    "accountCode": "1000",
                    "accountName": "Cash",
                },
            ],
        )

    def test_detail_missing_returns_404(self):
        res = self.client.get(_detail_url(999999))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.json()["message"], "JournalEntry not found: 999999")
        self.assertEqual(res.json()["error"], "Not Found")

    def test_listing_is_newest_date_first_with_totals(self):
        older = self._create(entry_date="2025-12-17", description="First entry", amount=10000)
        newer = self._create(entry_date="2025-12-18", description="Second entry", amount=20000)

        res = self.client.get(ENTRIES_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.json(),
            [
                {
                    "id": newer,
                    "entryDate": "2025-12-18",
                    "description": "Second entry",
                    "debitTotal": 20000,
                    "creditTotal": 20000,
                },
                {
                    "id": older,
                    "entryDate": "2025-12-17",
                    "description": "First entry",
                    "debitTotal": 10000,
                    "creditTotal": 10000,
                },
            ],
        )

    def test_listing_totals_match_detail(self):
        for amount in (100, 2500, 7):
            self._create(amount=amount)

        for summary in self.client.get(ENTRIES_URL).json():
            lines = self.client.get(_detail_url(summary["id"])).json()["lines"]
            self.assertEqual(
                summary["debitTotal"],
                sum(l["amount"] for l in lines if l["dcType"] == "DEBIT"),
            )
            self.assertEqual(
                summary["creditTotal"],
                sum(l["amount"] for l in lines if l["dcType"] == "CREDIT"),
            )

    # =====================================================
    # PATCH (description only)
    # =====================================================

    def test_patch_description_then_get_reflects_change(self):
        entry_id = self._create(description="Old description")
        lines_before = self.client.get(_detail_url(entry_id)).json()["lines"]

        res = self.client.patch(_detail_url(entry_id), {"description": "New description"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json()["description"], "New description")

        data = self.client.get(_detail_url(entry_id)).json()
        self.assertEqual(data["description"], "New description")
        self.assertEqual(data["lines"], lines_before)

    def test_patch_blank_description_returns_400(self):
        entry_id = self._create()

        res = self.client.patch(_detail_url(entry_id), {"description": ""}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(JournalEntry.objects.get(id=entry_id).description, "Buy product with cash")

    def test_patch_missing_entry_returns_404(self):
        res = self.client.patch(_detail_url(999999), {"description": "Nope"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
