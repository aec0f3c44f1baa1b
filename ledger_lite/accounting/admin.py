# accounting/admin.py

from django.contrib import admin

from accounting.models.account import Account
from accounting.models.journal import JournalEntry
from accounting.models.line import JournalLine

# ============================================================
# ACCOUNT
# ============================================================


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "name", "created_at")
    search_fields = ("code", "name")
    ordering = ("code",)
    readonly_fields = ("created_at",)

    def get_readonly_fields(self, request, obj=None):
        # code is immutable once the account exists
        if obj is not None:
            return ("code", "created_at")
        return self.readonly_fields

    def has_delete_permission(self, request, obj=None):
        return False


# ============================================================
# JOURNAL ENTRY (READ-ONLY, LINES INLINE)
# ============================================================


class JournalLineInline(admin.TabularInline):
    model = JournalLine
    extra = 0
    fields = ("dc_type", "amount", "account")
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(JournalEntry)
class JournalEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "entry_date", "description", "created_at")
    list_filter = ("entry_date",)
    search_fields = ("description",)
    ordering = ("-entry_date", "-id")
    inlines = [JournalLineInline]

    readonly_fields = (
        "entry_date",
        "description",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
