# accounting/tests/test_seed_command.py

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from accounting.management.commands.seed_ledger_accounts import DEFAULT_ACCOUNTS
from accounting.models.account import Account


class SeedLedgerAccountsCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_ledger_accounts", stdout=StringIO())
        call_command("seed_ledger_accounts", stdout=StringIO())

        self.assertEqual(Account.objects.count(), len(DEFAULT_ACCOUNTS))
        self.assertEqual(Account.objects.get(code="1111").name, "Product")

    def test_existing_names_kept_unless_rename(self):
        Account.objects.create(code="1000", name="Petty Cash")

        call_command("seed_ledger_accounts", stdout=StringIO())
        self.assertEqual(Account.objects.get(code="1000").name, "Petty Cash")

        out = StringIO()
        call_command("seed_ledger_accounts", "--rename", stdout=out)
        self.assertEqual(Account.objects.get(code="1000").name, "Cash")
        self.assertIn("updated=1", out.getvalue())
