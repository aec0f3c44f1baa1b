# accounting/api/views/__init__.py

"""
accounting.api.views package

Expose public API views cleanly without making routing/imports fragile.
Do NOT import accounting.api.urls from here to avoid circular imports.
"""

from accounting.api.views.accounts import AccountListCreateView
from accounting.api.views.journal_entries import (
    JournalEntryDetailView,
    JournalEntryListCreateView,
)

__all__ = [
    "AccountListCreateView",
    "JournalEntryListCreateView",
    "JournalEntryDetailView",
]
