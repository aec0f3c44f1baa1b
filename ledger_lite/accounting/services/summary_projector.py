# accounting/services/summary_projector.py

"""
PATH: accounting/services/summary_projector.py

SUMMARY PROJECTOR (READ PATH)

Turns fully populated JournalEntry rows into response records.

Read-path leniency:
- totals are recomputed from persisted lines, NOT re-validated
- a line whose side is neither DEBIT nor CREDIT (only possible through
  out-of-band edits) is skipped from both totals instead of failing
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from accounting.models.journal import JournalEntry
from accounting.models.line import JournalLine


@dataclass(frozen=True)
class EntrySummary:
    id: int
    entry_date: date
    description: str
    debit_total: int
    credit_total: int


@dataclass(frozen=True)
class LineDetail:
    dc_type: str
    amount: int
    account_id: int
    account_code: str
    account_name: str


@dataclass(frozen=True)
class EntryDetail:
    id: int
    entry_date: date
    description: str
    lines: list[LineDetail]


def project_summary(entry: JournalEntry) -> EntrySummary:
    debit_total = 0
    credit_total = 0

    for line in entry.lines.all():
        if line.dc_type == JournalLine.DEBIT:
            debit_total += line.amount
        elif line.dc_type == JournalLine.CREDIT:
            credit_total += line.amount

    return EntrySummary(
        id=entry.id,
        entry_date=entry.entry_date,
        description=entry.description,
        debit_total=debit_total,
        credit_total=credit_total,
    )


def project_summaries(entries: Iterable[JournalEntry]) -> list[EntrySummary]:
    return [project_summary(e) for e in entries]


def project_detail(entry: JournalEntry) -> EntryDetail:
    return EntryDetail(
        id=entry.id,
        entry_date=entry.entry_date,
        description=entry.description,
        lines=[
            LineDetail(
                dc_type=line.dc_type,
                amount=line.amount,
                account_id=line.account_id,
                account_code=line.account.code,
                account_name=line.account.name,
            )
            for line in entry.lines.all()
        ],
    )
