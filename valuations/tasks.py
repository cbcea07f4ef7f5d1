from __future__ import annotations

from datetime import date

from celery import shared_task
from django.db.utils import OperationalError
from valuations.services.nav import record_nav


@shared_task(bind=True, autoretry_for=(OperationalError,), retry_backoff=True, max_retries=5)
def record_nav_task(self, *, fund_id: str, nav: str, nav_date: str | None = None) -> dict:
    """
    Celery wrapper for publishing a NAV (e.g. from a nightly price feed).
    """
    record = record_nav(
        fund_id=fund_id,
        nav=nav,
        nav_date=date.fromisoformat(nav_date) if nav_date else None,
    )
    return {
        "fund_id": record.fund_id,
        "nav_date": str(record.nav_date),
        "nav": str(record.nav),
    }
