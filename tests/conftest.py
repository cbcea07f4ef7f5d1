from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.models import Group
from django.utils import timezone
from funds.services.registry import register_fund
from rest_framework.test import APIClient

FUND_ID = "2342323545"
USERNAME = "subish12396"
TODAY_NAV = Decimal("123.45")


def _user_in_role(django_user_model, username, role):
    user = django_user_model.objects.create_user(username=username, password="secret")
    group, _ = Group.objects.get_or_create(name=role)
    user.groups.add(group)
    return user


@pytest.fixture
def investor(db, django_user_model):
    return _user_in_role(django_user_model, USERNAME, "USER")


@pytest.fixture
def other_investor(db, django_user_model):
    return _user_in_role(django_user_model, "someone_else", "USER")


@pytest.fixture
def fund_admin(db, django_user_model):
    return _user_in_role(django_user_model, "fund_admin", "ADMIN")


@pytest.fixture
def fund(db):
    return register_fund(
        fund_id=FUND_ID,
        fund_name="Nippon Index Fund",
        total_units=Decimal("4820"),
        nav=TODAY_NAV,
        nav_date=timezone.localdate(),
    )


@pytest.fixture
def stale_fund(db):
    """A fund whose only NAV is from yesterday."""
    return register_fund(
        fund_id="STALE01",
        fund_name="Stale Debt Fund",
        total_units=Decimal("500"),
        nav=Decimal("10.00"),
        nav_date=timezone.localdate() - timedelta(days=1),
    )


@pytest.fixture
def api_client():
    return APIClient()
