from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from core.exceptions import FundNotFound
from django.db import transaction
from django.utils import timezone
from funds.models import Fund
from valuations.models import FundNav

log = logging.getLogger(__name__)


def record_nav(*, fund_id: str, nav: Decimal, nav_date: date | None = None) -> FundNav:
    """
    Append a NAV record for (fund, nav_date).

    Duplicates are left to the (fund, nav_date) unique constraint.
    """
    nav = Decimal(nav)
    if nav <= 0:
        raise ValueError("nav must be > 0")

    nav_date = nav_date or timezone.localdate()

    fund = Fund.objects.filter(pk=fund_id).first()
    if fund is None:
        log.info("NAV update rejected, unknown fund_id=%s", fund_id)
        raise FundNotFound(f"No fund with fund_id={fund_id}")

    with transaction.atomic():
        record = FundNav.objects.create(fund=fund, nav=nav, nav_date=nav_date)

    log.info("NAV recorded fund_id=%s nav=%s nav_date=%s", fund.fund_id, nav, nav_date)
    return record


def get_nav_for_date(*, fund: Fund, as_of: date) -> FundNav | None:
    return FundNav.objects.filter(fund=fund, nav_date=as_of).first()
