# accounting/services/account_directory.py

"""
PATH: accounting/services/account_directory.py

ACCOUNT DIRECTORY

Read-side lookups the journal core consults, plus account registration.

Rules:
- No caching: every resolve() is a fresh query
- Account codes are unique; the database constraint is the canonical
  conflict point. The find_by_code() pre-check only gives the same
  answer earlier. Both paths raise the SAME LedgerConflictError.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from accounting.models.account import Account
from accounting.services.exceptions import (
    LedgerConflictError,
    LedgerNotFoundError,
    LedgerValidationError,
)

logger = logging.getLogger(__name__)

MSG_DUPLICATE_CODE = "Already exists (unique constraint violated)"


class AccountDirectory:
    def resolve(self, account_id) -> Account:
        try:
            return Account.objects.get(pk=account_id)
        except (Account.DoesNotExist, TypeError, ValueError) as exc:
            raise LedgerNotFoundError(f"Account not found: {account_id}") from exc

    def find_by_code(self, code: str) -> Account | None:
        return Account.objects.filter(code=(code or "").strip()).first()

    def list_all(self) -> list[Account]:
        return list(Account.objects.order_by("id"))

    def register(self, *, code: str, name: str) -> Account:
        code = (code or "").strip()
        name = (name or "").strip()

        if not code:
            raise LedgerValidationError("Account code is required")
        if not name:
            raise LedgerValidationError("Account name is required")

        if self.find_by_code(code) is not None:
            logger.info("Account code rejected by pre-check", extra={"code": code})
            raise LedgerConflictError(MSG_DUPLICATE_CODE)

        # Savepoint: a concurrent insert of the same code loses here.
        try:
            with transaction.atomic():
                account = Account.objects.create(code=code, name=name)
        except IntegrityError as exc:
            logger.info("Account code rejected by unique constraint", extra={"code": code})
            raise LedgerConflictError(MSG_DUPLICATE_CODE) from exc

        logger.info("Account registered", extra={"account_id": account.id, "code": code})
        return account
