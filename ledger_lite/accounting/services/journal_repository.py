# accounting/services/journal_repository.py

"""
======================================================
PATH: accounting/services/journal_repository.py
======================================================
JOURNAL REPOSITORY

Persistence for the JournalEntry aggregate.

Guarantees:
- create_atomic(): header + all lines in ONE transaction, lines written in
  the order supplied; any failure rolls back the header too
- reads load entry + lines + line accounts in a bounded number of queries
  (header query + one prefetch query), never one query per line
- listing is ordered entry_date DESC, id DESC and has no duplicate entries
- update_description(): row-locked, touches description only
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from accounting.models.journal import JournalEntry
from accounting.models.line import JournalLine
from accounting.services.exceptions import (
    LedgerNotFoundError,
    LedgerValidationError,
)
from accounting.services.journal_aggregate import JournalDraft

logger = logging.getLogger(__name__)


def _populated() -> QuerySet:
    return JournalEntry.objects.prefetch_related(
        Prefetch(
            "lines",
            queryset=JournalLine.objects.select_related("account").order_by("id"),
        )
    )


class JournalRepository:
    def create_atomic(self, draft: JournalDraft) -> int:
        with transaction.atomic():
            entry = JournalEntry(
                entry_date=draft.entry_date,
                description=draft.description,
                created_at=draft.created_at,
            )
            entry.save()

            JournalLine.objects.bulk_create(
                [
                    JournalLine(
                        entry_id=entry.id,
                        account_id=line.account.id,
                        dc_type=line.dc_type,
                        amount=line.amount,
                    )
                    for line in draft.lines
                ]
            )

        logger.info(
            "Journal entry persisted",
            extra={"entry_id": entry.id, "line_count": len(draft.lines)},
        )
        return entry.id

    def get_by_id(self, entry_id) -> JournalEntry:
        try:
            return _populated().get(pk=entry_id)
        except (JournalEntry.DoesNotExist, TypeError, ValueError) as exc:
            raise LedgerNotFoundError(f"JournalEntry not found: {entry_id}") from exc

    def list_all_ordered(self) -> list[JournalEntry]:
        return list(_populated().order_by("-entry_date", "-id"))

    def update_description(self, entry_id, description: str) -> JournalEntry:
        description = (description or "").strip()
        if not description:
            raise LedgerValidationError("description is required")

        with transaction.atomic():
            try:
                entry = JournalEntry.objects.select_for_update().get(pk=entry_id)
            except (JournalEntry.DoesNotExist, TypeError, ValueError) as exc:
                raise LedgerNotFoundError(f"JournalEntry not found: {entry_id}") from exc

            entry.description = description
            entry.save(update_fields=["description"])

            logger.info("Journal entry description updated", extra={"entry_id": entry.id})
            return self.get_by_id(entry.id)
