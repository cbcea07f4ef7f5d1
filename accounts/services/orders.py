from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from accounts.models import FundTransaction, Holding, OrderType
from core.exceptions import (
    BackOfficeError,
    FundNotFound,
    InsufficientFundUnits,
    InsufficientUserUnits,
    NavMismatch,
    UserNotFound,
)
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from funds.models import Fund
from valuations.services.nav import get_nav_for_date

log = logging.getLogger(__name__)

USD_Q = Decimal("0.01")


def _q_usd(x: Decimal) -> Decimal:
    return x.quantize(USD_Q, rounding=ROUND_HALF_UP)


@dataclass
class OrderResult:
    order_type: OrderType
    fund: Fund
    holding: Holding
    transaction: FundTransaction
    amount: Decimal


def _resolve_order_nav(*, fund: Fund, quoted_nav: Decimal) -> Decimal:
    """
    Validate the caller's NAV against today's published NAV.

    With no NAV for today the quote is accepted as-is, unless
    BACKOFFICE_REQUIRE_NAV_TODAY is set.
    """
    today = timezone.localdate()
    record = get_nav_for_date(fund=fund, as_of=today)

    if record is None:
        if getattr(settings, "BACKOFFICE_REQUIRE_NAV_TODAY", False):
            raise NavMismatch(f"No NAV published for fund_id={fund.fund_id} on {today}")
        log.warning(
            "No NAV published for fund_id=%s on %s; pricing at quoted nav=%s",
            fund.fund_id,
            today,
            quoted_nav,
        )
        return quoted_nav

    if record.nav != quoted_nav:
        raise NavMismatch(
            f"Quoted nav={quoted_nav} does not match nav={record.nav} for {today}"
        )
    return record.nav


def _buy(
    *, user, fund: Fund, holding: Optional[Holding], units: Decimal, nav: Decimal
) -> tuple[Holding, Decimal]:
    if fund.total_units <= units:
        raise InsufficientFundUnits(
            f"fund_id={fund.fund_id} pool={fund.total_units} requested={units}"
        )

    amount = _q_usd(units * nav)

    if holding is None:
        holding = Holding(user=user, fund=fund, units=units, total_value=amount)
    else:
        holding.units = holding.units + units
        holding.total_value = holding.total_value + amount

    fund.total_units = fund.total_units - units
    return holding, amount


def _redeem(
    *, user, fund: Fund, holding: Optional[Holding], units: Decimal, nav: Decimal
) -> tuple[Holding, Decimal]:
    # Strict: a full-balance redemption is rejected too.
    if holding is None or holding.units <= units:
        held = holding.units if holding is not None else Decimal("0")
        raise InsufficientUserUnits(
            f"user={user.username} fund_id={fund.fund_id} held={held} requested={units}"
        )

    amount = _q_usd(units * nav)

    holding.units = holding.units - units
    holding.total_value = holding.total_value - amount
    fund.total_units = fund.total_units + units
    return holding, amount


ORDER_HANDLERS: dict[OrderType, Callable[..., tuple[Holding, Decimal]]] = {
    OrderType.BUY: _buy,
    OrderType.REDEEM: _redeem,
}


def place_order(
    *,
    username: str,
    fund_id: str,
    units: Decimal,
    nav: Decimal,
    order_type: OrderType | str,
) -> OrderResult:
    """
    Apply a BUY or REDEEM order to the fund pool and the user's holding,
    and append one FundTransaction.

    The fund and holding rows are locked for the duration of the update so
    concurrent orders on the same fund cannot lose writes.
    """
    order_type = OrderType.parse(order_type)
    units = Decimal(units)
    nav = Decimal(nav)
    if units <= 0:
        raise ValueError("units must be > 0")

    log.info(
        "Processing %s order user=%s fund_id=%s units=%s nav=%s",
        order_type,
        username,
        fund_id,
        units,
        nav,
    )

    User = get_user_model()

    try:
        with transaction.atomic():
            user = User.objects.filter(username=username).first()
            if user is None:
                raise UserNotFound(f"No user with username={username}")

            fund = Fund.objects.select_for_update().filter(pk=fund_id).first()
            if fund is None:
                raise FundNotFound(f"No fund with fund_id={fund_id}")

            price = _resolve_order_nav(fund=fund, quoted_nav=nav)

            holding = (
                Holding.objects.select_for_update()
                .filter(user=user, fund=fund)
                .first()
            )

            handler = ORDER_HANDLERS[order_type]
            holding, amount = handler(
                user=user, fund=fund, holding=holding, units=units, nav=price
            )

            holding.save()
            fund.save(update_fields=["total_units", "updated_at"])

            txn = FundTransaction.objects.create(
                user=user,
                fund=fund,
                type=order_type,
                units=units,
                nav=price,
                amount=amount,
            )
    except BackOfficeError as e:
        log.info("%s order rejected code=%s: %s", order_type, e.code, e.detail)
        raise

    log.info(
        "%s order completed user=%s fund_id=%s units=%s amount=%s pool=%s",
        order_type,
        username,
        fund.fund_id,
        units,
        amount,
        fund.total_units,
    )
    return OrderResult(
        order_type=order_type,
        fund=fund,
        holding=holding,
        transaction=txn,
        amount=amount,
    )
