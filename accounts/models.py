from django.conf import settings
from django.db import models


class OrderType(models.TextChoices):
    BUY = "BUY", "Buy"
    REDEEM = "REDEEM", "Redeem"

    @classmethod
    def parse(cls, value) -> "OrderType":
        """Case-insensitive lookup; raises ValueError for anything else."""
        return cls(str(value or "").strip().upper())


class Holding(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="holdings",
    )
    fund = models.ForeignKey(
        "funds.Fund",
        on_delete=models.CASCADE,
        related_name="holdings",
    )

    units = models.DecimalField(max_digits=20, decimal_places=8)
    total_value = models.DecimalField(max_digits=24, decimal_places=2)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "user_holdings"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "fund"],
                name="uq_holding_user_fund",
            ),
            models.CheckConstraint(
                condition=models.Q(units__gte=0),
                name="ck_holding_units_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.user} {self.fund_id} {self.units} units"


class FundTransaction(models.Model):
    """Append-only order history; one row per completed order."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="fund_transactions",
    )
    fund = models.ForeignKey(
        "funds.Fund",
        on_delete=models.PROTECT,
        related_name="transactions",
    )

    type = models.CharField(max_length=8, choices=OrderType.choices)

    units = models.DecimalField(max_digits=20, decimal_places=8)
    nav = models.DecimalField(max_digits=18, decimal_places=8)
    amount = models.DecimalField(max_digits=24, decimal_places=2)

    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "transactions"
        ordering = ["-timestamp", "-id"]
        indexes = [
            models.Index(fields=["user", "fund"], name="ix_transaction_user_fund"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError(
                "Transactions are immutable. Place an offsetting order to correct mistakes."
            )
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.user} {self.type} {self.units} {self.fund_id} @ {self.nav}"
