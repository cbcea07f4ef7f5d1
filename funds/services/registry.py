from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from core.exceptions import FundAlreadyExists
from django.db import transaction
from django.utils import timezone
from funds.models import Fund
from valuations.models import FundNav

log = logging.getLogger(__name__)


def register_fund(
    *,
    fund_id: str,
    fund_name: str,
    total_units: Decimal,
    nav: Decimal,
    nav_date: date | None = None,
) -> Fund:
    """
    Create a fund together with its first NAV record.

    Raises FundAlreadyExists when fund_id is taken.
    """
    total_units = Decimal(total_units)
    nav = Decimal(nav)
    if total_units < 0:
        raise ValueError("total_units must be >= 0")
    if nav <= 0:
        raise ValueError("nav must be > 0")

    nav_date = nav_date or timezone.localdate()

    log.info("Processing fund registration fund_id=%s", fund_id)

    with transaction.atomic():
        if Fund.objects.filter(pk=fund_id).exists():
            log.info("Fund registration rejected, fund_id=%s already exists", fund_id)
            raise FundAlreadyExists(f"Fund already exists: fund_id={fund_id}")

        fund = Fund.objects.create(
            fund_id=fund_id,
            fund_name=fund_name,
            total_units=total_units,
        )
        FundNav.objects.create(fund=fund, nav=nav, nav_date=nav_date)

    log.info(
        "Fund registered fund_id=%s total_units=%s nav=%s nav_date=%s",
        fund.fund_id,
        fund.total_units,
        nav,
        nav_date,
    )
    return fund
