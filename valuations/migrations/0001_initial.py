import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("funds", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="FundNav",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("nav_date", models.DateField(help_text="Valuation date")),
                (
                    "nav",
                    models.DecimalField(
                        decimal_places=8,
                        help_text="NAV per unit on this date",
                        max_digits=18,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "fund",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="navs",
                        to="funds.fund",
                    ),
                ),
            ],
            options={
                "db_table": "fund_navs",
                "ordering": ["-nav_date"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("fund", "nav_date"),
                        name="uq_fundnav_fund_nav_date",
                    )
                ],
            },
        ),
    ]
