# accounts/admin.py
from __future__ import annotations

from django.contrib import admin
from django.db.models import Sum

from accounts.models import FundTransaction, Holding


@admin.register(Holding)
class HoldingAdmin(admin.ModelAdmin):
    list_display = ("user", "fund", "units", "total_value", "updated_at")
    list_filter = ("fund",)
    search_fields = ("user__username", "fund__fund_id", "fund__fund_name")
    readonly_fields = ("updated_at",)


@admin.register(FundTransaction)
class FundTransactionAdmin(admin.ModelAdmin):
    """
    Transaction ledger admin:
    - rows are written by the order service only
    - ledger entries are immutable
    """

    list_display = (
        "timestamp",
        "user",
        "fund",
        "type",
        "units",
        "nav",
        "amount",
    )
    list_filter = ("type", "fund")
    search_fields = ("user__username", "fund__fund_id")
    date_hierarchy = "timestamp"
    ordering = ("-timestamp",)

    readonly_fields = ("user", "fund", "type", "units", "nav", "amount", "timestamp")

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        # View-only
        if request.method in ("POST", "PUT", "PATCH"):
            return False
        return super().has_change_permission(request, obj=obj)

    def has_delete_permission(self, request, obj=None) -> bool:
        return False

    def changelist_view(self, request, extra_context=None):
        extra_context = extra_context or {}
        qs = self.get_queryset(request)
        extra_context["total_amount"] = qs.aggregate(Sum("amount"))["amount__sum"]
        return super().changelist_view(request, extra_context=extra_context)
