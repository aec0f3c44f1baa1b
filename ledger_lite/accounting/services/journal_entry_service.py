# accounting/services/journal_entry_service.py

"""
======================================================
PATH: accounting/services/journal_entry_service.py
======================================================
JOURNAL ENTRY SERVICE (ACCOUNTING ENGINE)

This module is the ONLY place allowed to:
- Create JournalEntry / JournalLine rows
- Enforce debit == credit
- Change a journal entry after creation (description only)

Creation flow:
    check_balance -> AccountDirectory.resolve (fail fast)
    -> build_journal_entry -> JournalRepository.create_atomic

Wiring is explicit: collaborators are passed to the constructor.
default_service() builds the production wiring for the API views.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from django.db import transaction

from accounting.services.account_directory import AccountDirectory
from accounting.services.balance_validator import check_balance
from accounting.services.journal_aggregate import build_journal_entry
from accounting.services.journal_repository import JournalRepository
from accounting.services.summary_projector import (
    EntryDetail,
    EntrySummary,
    project_detail,
    project_summaries,
)

logger = logging.getLogger(__name__)


class JournalEntryService:
    def __init__(self, *, repository: JournalRepository, directory: AccountDirectory):
        self.repository = repository
        self.directory = directory

    @transaction.atomic
    def create(self, *, entry_date, description: str, lines: Sequence[Any]) -> int:
        balance = check_balance(lines).raise_for_error()

        draft = build_journal_entry(
            entry_date=entry_date,
            description=description,
            lines=lines,
            directory=self.directory,
        )
        entry_id = self.repository.create_atomic(draft)

        logger.info(
            "Journal entry created",
            extra={
                "entry_id": entry_id,
                "debit_total": balance.debit_total,
                "credit_total": balance.credit_total,
            },
        )
        return entry_id

    def get(self, entry_id) -> EntryDetail:
        return project_detail(self.repository.get_by_id(entry_id))

    def list_summaries(self) -> list[EntrySummary]:
        return project_summaries(self.repository.list_all_ordered())

    def update_description(self, entry_id, description: str) -> EntryDetail:
        entry = self.repository.update_description(entry_id, description)
        return project_detail(entry)


def default_service() -> JournalEntryService:
    return JournalEntryService(
        repository=JournalRepository(),
        directory=AccountDirectory(),
    )
