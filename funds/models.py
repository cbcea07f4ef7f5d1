# funds/models.py
from django.db import models


class Fund(models.Model):
    # -----------------------------
    # Identity
    # -----------------------------
    fund_id = models.CharField(
        primary_key=True,
        max_length=64,
        help_text="Fund identifier (scheme code)",
    )

    fund_name = models.CharField(
        max_length=255,
        help_text="Human-readable fund name",
    )

    # -----------------------------
    # Unit pool
    # -----------------------------
    total_units = models.DecimalField(
        max_digits=20,
        decimal_places=8,
        help_text="Unallocated units available for purchase",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "funds_scripts"
        ordering = ["fund_id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_units__gte=0),
                name="ck_fund_total_units_non_negative",
            )
        ]

    def __str__(self):
        return f"{self.fund_id} ({self.fund_name})"
