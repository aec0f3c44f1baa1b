# accounting/management/commands/seed_ledger_accounts.py

from django.core.management.base import BaseCommand
from django.db import transaction

from accounting.models.account import Account

DEFAULT_ACCOUNTS = [
    ("1000", "Cash"),
    ("1010", "Bank Account"),
    ("1111", "Product"),
    ("1200", "Accounts Receivable"),
    ("2000", "Accounts Payable"),
    ("3000", "Owner Capital"),
    ("4000", "Sales Revenue"),
    ("5000", "Cost of Goods Sold"),
]


class Command(BaseCommand):
    help = "Seed the default chart of accounts (idempotent; codes are never changed)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--rename",
            action="store_true",
            help="Update names of existing accounts to the defaults",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding default chart of accounts...")

        created_count = 0
        updated_count = 0

        for code, name in DEFAULT_ACCOUNTS:
            acc, acc_created = Account.objects.get_or_create(
                code=code,
                defaults={"name": name},
            )

            if acc_created:
                created_count += 1
                continue

            if options["rename"] and acc.name != name:
                acc.name = name
                acc.save(update_fields=["name"])
                updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Chart seeded (created={created_count}, updated={updated_count})"
            )
        )
