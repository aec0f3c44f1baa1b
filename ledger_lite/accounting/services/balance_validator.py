# accounting/services/balance_validator.py

"""
======================================================
PATH: accounting/services/balance_validator.py
======================================================
BALANCE VALIDATOR (WRITE PATH)

Pure check over a proposed set of lines:
- every side is exactly "DEBIT" or "CREDIT" (case-sensitive)
- every amount is a positive integer (minor units) that fits in 64 bits
- debit total == credit total

Returns a BalanceCheck outcome instead of raising, so the caller decides
when to fail. Only the first violation (in input order) is reported.
No clock, no randomness, no database access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from accounting.models.line import JournalLine
from accounting.services.exceptions import LedgerValidationError

SIDES = (JournalLine.DEBIT, JournalLine.CREDIT)

MSG_EMPTY = "journal entry must have at least one line"
MSG_SIDE = "side must be DEBIT or CREDIT"
MSG_AMOUNT = "amount must be positive"
MSG_UNBALANCED = "debit sum must equal credit sum"
MSG_AMOUNT_RANGE = "amount exceeds the 64-bit maximum"

# JournalLine.amount is a BigIntegerField
MAX_AMOUNT = 2**63 - 1


@dataclass(frozen=True)
class BalanceCheck:
    debit_total: int = 0
    credit_total: int = 0
    error: LedgerValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "BalanceCheck":
        if self.error is not None:
            raise self.error
        return self


def _failed(message: str) -> BalanceCheck:
    return BalanceCheck(error=LedgerValidationError(message))


def line_field(line: Any, name: str):
    """Read a line attribute from a mapping or an object."""
    if isinstance(line, Mapping):
        return line.get(name)
    return getattr(line, name, None)


def check_balance(lines: Iterable[Any]) -> BalanceCheck:
    """
    Validate proposed lines (dicts or objects exposing dc_type / amount).
    """
    debit_total = 0
    credit_total = 0
    seen = 0

    for line in lines:
        seen += 1
        side = line_field(line, "dc_type")
        amount = line_field(line, "amount")

        if side not in SIDES:
            return _failed(MSG_SIDE)

        # bool is an int subclass; True is not an amount
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            return _failed(MSG_AMOUNT)

        if amount > MAX_AMOUNT:
            return _failed(MSG_AMOUNT_RANGE)

        if side == JournalLine.DEBIT:
            debit_total += amount
        else:
            credit_total += amount

    if seen == 0:
        return _failed(MSG_EMPTY)

    if debit_total != credit_total:
        return _failed(MSG_UNBALANCED)

    return BalanceCheck(debit_total=debit_total, credit_total=credit_total)
