# accounting/api/urls.py

"""
Mounted at /api/ (see backend/urls.py). Paths carry no trailing slash to
match the public wire contract (/api/accounts, /api/journal-entries/{id}).
"""

from django.urls import path

from accounting.api.views import (
    AccountListCreateView,
    JournalEntryDetailView,
    JournalEntryListCreateView,
)

urlpatterns = [
    # Master data
    path("accounts", AccountListCreateView.as_view(), name="accounts"),
    # Journal
    path(
        "journal-entries",
        JournalEntryListCreateView.as_view(),
        name="journal-entries",
    ),
    path(
        "journal-entries/<int:pk>",
        JournalEntryDetailView.as_view(),
        name="journal-entry-detail",
    ),
]
