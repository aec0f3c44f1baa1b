# accounting/services/exceptions.py

"""
ACCOUNTING SERVICE ERRORS

Centralized domain errors for the ledger core.

Every error carries a `kind`. The HTTP boundary maps on `kind` alone
(see accounting/api/exception_handler.py), so callers never need to
inspect the class hierarchy to decide the outcome.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    MALFORMED = "MALFORMED"


class LedgerError(Exception):
    """Base exception for all ledger core failures."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LedgerValidationError(LedgerError):
    """Well-formed input that breaks a bookkeeping rule."""

    kind = ErrorKind.VALIDATION


class LedgerNotFoundError(LedgerError):
    """Referenced account or journal entry does not exist."""

    kind = ErrorKind.NOT_FOUND


class LedgerConflictError(LedgerError):
    """Duplicate account code (pre-check or unique constraint)."""

    kind = ErrorKind.CONFLICT


class MalformedInputError(LedgerError):
    """Request body could not be parsed at all."""

    kind = ErrorKind.MALFORMED
