# accounting/api/serializers/__init__.py

from accounting.api.serializers.accounts import (
    AccountCreateSerializer,
    AccountSerializer,
)
from accounting.api.serializers.journal_entries import (
    JournalEntryCreateResponseSerializer,
    JournalEntryCreateSerializer,
    JournalEntryDetailSerializer,
    JournalEntrySummarySerializer,
    JournalEntryUpdateSerializer,
)

__all__ = [
    "AccountSerializer",
    "AccountCreateSerializer",
    "JournalEntryCreateSerializer",
    "JournalEntryCreateResponseSerializer",
    "JournalEntryDetailSerializer",
    "JournalEntrySummarySerializer",
    "JournalEntryUpdateSerializer",
]
