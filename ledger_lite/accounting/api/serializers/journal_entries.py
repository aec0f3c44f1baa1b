# accounting/api/serializers/journal_entries.py

"""
Journal entry wire contract (camelCase on the wire, snake_case inside).

Shape validation only: required fields, types, at least one line, and
amounts within the BigIntegerField range.
Bookkeeping rules (side values, balance, account existence) live in the
service layer so they hold for every caller.
"""

from rest_framework import serializers

from accounting.services.balance_validator import MAX_AMOUNT


class JournalLineInputSerializer(serializers.Serializer):
    dcType = serializers.CharField(source="dc_type")
    amount = serializers.IntegerField(min_value=1, max_value=MAX_AMOUNT)
    accountId = serializers.IntegerField(source="account_id")


class JournalEntryCreateSerializer(serializers.Serializer):
    entryDate = serializers.DateField(source="entry_date")
    description = serializers.CharField()
    lines = JournalLineInputSerializer(many=True, allow_empty=False)


class JournalEntryCreateResponseSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)


class JournalEntryUpdateSerializer(serializers.Serializer):
    description = serializers.CharField()


class JournalLineDetailSerializer(serializers.Serializer):
    dcType = serializers.CharField(source="dc_type", read_only=True)
    amount = serializers.IntegerField(read_only=True)
    accountId = serializers.IntegerField(source="account_id", read_only=True)
    accountCode = serializers.CharField(source="account_code", read_only=True)
    accountName = serializers.CharField(source="account_name", read_only=True)


class JournalEntryDetailSerializer(serializers.Serializer):
    """Output for GET /journal-entries/{id} and PATCH responses."""

    id = serializers.IntegerField(read_only=True)
    entryDate = serializers.DateField(source="entry_date", read_only=True)
    description = serializers.CharField(read_only=True)
    lines = JournalLineDetailSerializer(many=True, read_only=True)


class JournalEntrySummarySerializer(serializers.Serializer):
    """Output for GET /journal-entries (listing)."""

    id = serializers.IntegerField(read_only=True)
    entryDate = serializers.DateField(source="entry_date", read_only=True)
    description = serializers.CharField(read_only=True)
    debitTotal = serializers.IntegerField(source="debit_total", read_only=True)
    creditTotal = serializers.IntegerField(source="credit_total", read_only=True)
