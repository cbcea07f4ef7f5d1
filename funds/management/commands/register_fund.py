from __future__ import annotations

import json
from datetime import date
from decimal import Decimal, InvalidOperation

from core.exceptions import BackOfficeError
from django.core.management.base import BaseCommand, CommandError
from funds.services.registry import register_fund


class Command(BaseCommand):
    help = "Register a fund and seed its first NAV."

    def add_arguments(self, parser):
        parser.add_argument("--fund-id", type=str, required=True)
        parser.add_argument("--name", type=str, required=True, help="Fund name")
        parser.add_argument(
            "--total-units",
            type=str,
            required=True,
            help="Initial unit pool (e.g. 4820)",
        )
        parser.add_argument("--nav", type=str, required=True, help="Initial NAV per unit")
        parser.add_argument(
            "--nav-date",
            type=str,
            default=None,
            help="NAV date YYYY-MM-DD (default: today)",
        )

    def handle(self, *args, **opts):
        try:
            total_units = Decimal(opts["total_units"])
            nav = Decimal(opts["nav"])
        except InvalidOperation:
            raise CommandError("--total-units and --nav must be decimal numbers")

        nav_date = None
        if opts.get("nav_date"):
            try:
                nav_date = date.fromisoformat(opts["nav_date"])
            except ValueError:
                raise CommandError("Invalid --nav-date format. Use YYYY-MM-DD")

        try:
            fund = register_fund(
                fund_id=opts["fund_id"],
                fund_name=opts["name"],
                total_units=total_units,
                nav=nav,
                nav_date=nav_date,
            )
        except (BackOfficeError, ValueError) as e:
            raise CommandError(str(e))

        self.stdout.write(
            json.dumps(
                {
                    "fund_id": fund.fund_id,
                    "fund_name": fund.fund_name,
                    "total_units": str(fund.total_units),
                    "nav": str(nav),
                },
                indent=2,
            )
        )
