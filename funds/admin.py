# funds/admin.py
from django.contrib import admin
from valuations.models import FundNav

from .models import Fund


class FundNavInline(admin.TabularInline):
    model = FundNav
    extra = 0
    fields = ("nav_date", "nav", "created_at")
    readonly_fields = ("created_at",)
    ordering = ("-nav_date",)


@admin.register(Fund)
class FundAdmin(admin.ModelAdmin):
    list_display = (
        "fund_id",
        "fund_name",
        "total_units",
        "latest_nav",
        "created_at",
    )
    search_fields = ("fund_id", "fund_name")
    readonly_fields = ("created_at", "updated_at")

    fieldsets = (
        ("Identity", {"fields": ("fund_id", "fund_name")}),
        ("Unit pool", {"fields": ("total_units",)}),
        ("Meta", {"fields": ("created_at", "updated_at")}),
    )

    inlines = [FundNavInline]

    def get_readonly_fields(self, request, obj=None):
        # The id is the primary key; it cannot change once registered.
        if obj is not None:
            return ("fund_id",) + self.readonly_fields
        return self.readonly_fields

    @admin.display(description="Latest NAV")
    def latest_nav(self, obj: Fund):
        nav = obj.navs.order_by("-nav_date").first()
        return nav.nav if nav else "-"
