# valuations/models.py
from django.db import models


class FundNav(models.Model):
    fund = models.ForeignKey(
        "funds.Fund",
        on_delete=models.CASCADE,
        related_name="navs",
    )

    nav_date = models.DateField(help_text="Valuation date")

    nav = models.DecimalField(
        max_digits=18,
        decimal_places=8,
        help_text="NAV per unit on this date",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "fund_navs"
        ordering = ["-nav_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["fund", "nav_date"],
                name="uq_fundnav_fund_nav_date",
            )
        ]

    def __str__(self):
        return f"{self.fund_id} NAV {self.nav} on {self.nav_date}"
