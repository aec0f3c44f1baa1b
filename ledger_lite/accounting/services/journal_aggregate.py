# accounting/services/journal_aggregate.py

"""
======================================================
PATH: accounting/services/journal_aggregate.py
======================================================
JOURNAL AGGREGATE (ENTRY CONSTRUCTION)

Builds the in-memory JournalDraft for one entry before anything touches
storage.

Ownership:
- The draft exclusively owns its DraftLine value objects
- A DraftLine holds no reference back to the entry; the entry id is only
  attached when the repository maps lines to rows

Preconditions:
- lines already passed check_balance()
- every account is resolved here, in input order; the first missing
  account aborts construction (no draft with a dangling line)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable

from django.utils import timezone

from accounting.models.account import Account
from accounting.models.line import JournalLine
from accounting.services.account_directory import AccountDirectory
from accounting.services.balance_validator import line_field
from accounting.services.exceptions import LedgerValidationError

@dataclass(frozen=True)
class DraftLine:
    dc_type: str
    amount: int
    account: Account

@dataclass(frozen=True)
class JournalDraft:
    entry_date: date
    description: str
    created_at: datetime
    lines: tuple[DraftLine, ...] = field(default_factory=tuple)

    @property
    def debit_total(self) -> int:
        return sum(l.amount for l in self.lines if l.dc_type == JournalLine.DEBIT)

    @property
    def credit_total(self) -> int:
        return sum(l.amount for l in self.lines if l.dc_type == JournalLine.CREDIT)

def _parse_entry_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    raw = (str(value) if value is not None else "").strip()
    if not raw:
        raise LedgerValidationError("entryDate is required")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise LedgerValidationError(f"Invalid entryDate: {raw!r}") from exc

def build_journal_entry(
    *,
    entry_date,
    description: str,
    lines: Iterable[Any],
    directory: AccountDirectory,
    now: datetime | None = None,
) -> JournalDraft:
    entry_day = _parse_entry_date(entry_date)

    description = (description or "").strip()
    if not description:
        raise LedgerValidationError("description is required")

    draft_lines = tuple(
        DraftLine(
            dc_type=line_field(line, "dc_type"),
            amount=line_field(line, "amount"),
            account=directory.resolve(line_field(line, "account_id")),
        )
        for line in lines
    )
    if not draft_lines:
        raise LedgerValidationError("journal entry must have at least one line")

    return JournalDraft(
        entry_date=entry_day,
        description=description,
        created_at=now or timezone.now(),
        lines=draft_lines,
    )
