# accounting/models/journal.py

"""
======================================================
PATH: accounting/models/journal.py
======================================================
JOURNAL ENTRY MODEL

Represents a single accounting transaction (journal header).

Guarantees:
- Owns its lines (JournalLine.entry, CASCADE)
- description is the ONLY field that may change after creation
- created_at is assigned once, when the aggregate is built
- entry_date is the accounting date used for listing order
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

MUTABLE_FIELDS = frozenset({"description"})


class JournalEntry(models.Model):
    entry_date = models.DateField(help_text="Accounting date of the entry")

    description = models.TextField(help_text="Narrative description of the journal entry")

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        help_text="Timestamp when the journal entry was created",
    )

    class Meta:
        ordering = ["-entry_date", "-id"]
        indexes = [
            models.Index(fields=["entry_date", "id"], name="journal_entry_date_id_idx"),
        ]
        verbose_name = "Journal Entry"
        verbose_name_plural = "Journal Entries"

    def __str__(self):
        return f"JournalEntry #{self.id} – {self.entry_date}"

    def clean(self):
        self.description = (self.description or "").strip()
        if not self.description:
            raise ValidationError("Journal entry description is required")

    def save(self, *args, **kwargs):
        if self.pk:
            update_fields = kwargs.get("update_fields")
            if update_fields is None or not set(update_fields) <= MUTABLE_FIELDS:
                raise ValidationError(
                    "Only the description of a journal entry can be changed"
                )

        self.full_clean()
        return super().save(*args, **kwargs)
