from django.contrib import admin

from .models import FundNav


@admin.register(FundNav)
class FundNavAdmin(admin.ModelAdmin):
    list_display = ("nav_date", "fund", "fund_name", "nav", "created_at")
    list_filter = ("fund",)
    date_hierarchy = "nav_date"
    search_fields = ("fund__fund_id", "fund__fund_name")
    readonly_fields = ("created_at",)

    def fund_name(self, obj):
        return getattr(obj.fund, "fund_name", "")

    fund_name.short_description = "Fund name"
