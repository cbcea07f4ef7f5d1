from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Fund",
            fields=[
                (
                    "fund_id",
                    models.CharField(
                        help_text="Fund identifier (scheme code)",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "fund_name",
                    models.CharField(help_text="Human-readable fund name", max_length=255),
                ),
                (
                    "total_units",
                    models.DecimalField(
                        decimal_places=8,
                        help_text="Unallocated units available for purchase",
                        max_digits=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "funds_scripts",
                "ordering": ["fund_id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("total_units__gte", 0)),
                        name="ck_fund_total_units_non_negative",
                    )
                ],
            },
        ),
    ]
