# accounting/models/line.py

"""
======================================================
PATH: accounting/models/line.py
======================================================
JOURNAL LINE MODEL

One debit or credit posting against a single account.

Guarantees:
- Belongs to exactly one journal entry, set once at creation
- Amount is a positive integer in minor currency units; direction is via dc_type
- Immutable once created (no updates); removed only together with its entry
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from accounting.models.account import Account
from accounting.models.journal import JournalEntry


class JournalLine(models.Model):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    DC_TYPES = [
        (DEBIT, "Debit"),
        (CREDIT, "Credit"),
    ]

    entry = models.ForeignKey(
        JournalEntry,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    account = models.ForeignKey(
        Account,
        on_delete=models.PROTECT,
        related_name="journal_lines",
    )

    dc_type = models.CharField(
        max_length=6,
        choices=DC_TYPES,
    )

    amount = models.BigIntegerField(help_text="Positive amount in minor currency units")

    class Meta:
        verbose_name = "Journal Line"
        verbose_name_plural = "Journal Lines"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["account"], name="journal_line_account_idx"),
            models.Index(fields=["entry", "dc_type"], name="journal_line_entry_dc_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(amount__gt=0),
                name="chk_journal_line_amount_positive",
            ),
        ]

    def __str__(self):
        return f"{self.dc_type} {self.amount} → {self.account}"

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValidationError("JournalLine records are immutable and cannot be modified")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("JournalLine records cannot be deleted individually")
