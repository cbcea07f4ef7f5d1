from __future__ import annotations

import json
from datetime import date
from decimal import Decimal, InvalidOperation

from core.exceptions import BackOfficeError
from django.core.management.base import BaseCommand, CommandError
from valuations.services.nav import record_nav


class Command(BaseCommand):
    help = "Record a fund's NAV for a date."

    def add_arguments(self, parser):
        parser.add_argument("--fund-id", type=str, required=True)
        parser.add_argument("--nav", type=str, required=True, help="NAV per unit")
        parser.add_argument(
            "--date",
            type=str,
            default=None,
            help="Valuation date YYYY-MM-DD (default: today)",
        )

    def handle(self, *args, **opts):
        try:
            nav = Decimal(opts["nav"])
        except InvalidOperation:
            raise CommandError("--nav must be a decimal number")

        nav_date = None
        if opts.get("date"):
            try:
                nav_date = date.fromisoformat(opts["date"])
            except ValueError:
                raise CommandError("Invalid --date format. Use YYYY-MM-DD")

        try:
            record = record_nav(fund_id=opts["fund_id"], nav=nav, nav_date=nav_date)
        except (BackOfficeError, ValueError) as e:
            raise CommandError(str(e))

        self.stdout.write(
            json.dumps(
                {
                    "fund_id": record.fund_id,
                    "nav_date": str(record.nav_date),
                    "nav": str(record.nav),
                },
                indent=2,
            )
        )
