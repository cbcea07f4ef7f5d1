import base64
from datetime import timedelta
from decimal import Decimal

import pytest
from accounts.models import FundTransaction, Holding
from django.utils import timezone
from funds.models import Fund
from valuations.models import FundNav

FUNDS_URL = "/v1/api/funds"
ORDER_URL = "/v1/api/funds/order"


def _order_payload(username, fund_id, units="1000", nav="123.45"):
    return {"username": username, "fundId": fund_id, "units": units, "nav": nav}


@pytest.mark.django_db
class TestCreateFund:
    payload = {
        "fundId": "2342323545",
        "fundName": "Nippon Index Fund",
        "totalUnits": "4820",
        "nav": "232.1",
        "navDate": "2026-10-19",
    }

    def test_created(self, api_client, fund_admin):
        api_client.force_authenticate(user=fund_admin)
        res = api_client.post(FUNDS_URL, self.payload, format="json")

        assert res.status_code == 201
        body = res.json()
        assert body["code"] == 5001
        assert body["message"] == "Fund created successfully."
        assert body["fund"]["fundId"] == "2342323545"
        assert body["fund"]["fundName"] == "Nippon Index Fund"
        assert Decimal(body["fund"]["totalUnits"]) == Decimal("4820")
        assert FundNav.objects.filter(fund_id="2342323545").count() == 1

    def test_already_exists(self, api_client, fund_admin):
        api_client.force_authenticate(user=fund_admin)
        api_client.post(FUNDS_URL, self.payload, format="json")

        for _ in range(2):
            res = api_client.post(FUNDS_URL, self.payload, format="json")
            assert res.status_code == 200
            assert res.json()["code"] == 5002

    def test_validation_error(self, api_client, fund_admin):
        api_client.force_authenticate(user=fund_admin)
        res = api_client.post(FUNDS_URL, {"fundId": "X"}, format="json")

        assert res.status_code == 400
        body = res.json()
        assert body["code"] == 400
        assert "fundName" in body["errors"]

    def test_requires_admin_role(self, api_client, investor):
        api_client.force_authenticate(user=investor)
        res = api_client.post(FUNDS_URL, self.payload, format="json")

        assert res.status_code == 403
        assert not Fund.objects.exists()

    def test_requires_authentication(self, api_client, db):
        res = api_client.post(FUNDS_URL, self.payload, format="json")
        assert res.status_code == 401
        assert res.json()["code"] == 401

    def test_basic_auth(self, api_client, fund_admin):
        token = base64.b64encode(b"fund_admin:secret").decode()
        api_client.credentials(HTTP_AUTHORIZATION=f"Basic {token}")
        res = api_client.post(FUNDS_URL, self.payload, format="json")
        assert res.status_code == 201

    def test_session_auth(self, api_client, fund_admin):
        api_client.login(username="fund_admin", password="secret")
        res = api_client.post(FUNDS_URL, self.payload, format="json")
        assert res.status_code == 201


@pytest.mark.django_db
class TestUpdateNav:
    def test_updated(self, api_client, fund_admin, fund):
        api_client.force_authenticate(user=fund_admin)
        nav_date = timezone.localdate() + timedelta(days=1)
        res = api_client.put(
            f"{FUNDS_URL}/{fund.fund_id}",
            {"nav": "124.10", "navDate": nav_date.isoformat()},
            format="json",
        )

        assert res.status_code == 201
        assert res.json()["code"] == 5003
        assert FundNav.objects.get(fund=fund, nav_date=nav_date).nav == Decimal("124.10")

    def test_unknown_fund(self, api_client, fund_admin):
        api_client.force_authenticate(user=fund_admin)
        res = api_client.put(
            f"{FUNDS_URL}/NOPE", {"nav": "1.0", "navDate": "2026-10-19"}, format="json"
        )

        assert res.status_code == 400
        assert res.json() == {
            "code": 5006,
            "message": "Requested fund details are unavailable.",
        }

    def test_duplicate_date_is_a_generic_failure(self, api_client, fund_admin, fund):
        api_client.force_authenticate(user=fund_admin)
        res = api_client.put(
            f"{FUNDS_URL}/{fund.fund_id}",
            {"nav": "124.10", "navDate": timezone.localdate().isoformat()},
            format="json",
        )

        assert res.status_code == 500
        assert res.json()["code"] == 5000
        assert FundNav.objects.filter(fund=fund).count() == 1


@pytest.mark.django_db
class TestCreateOrder:
    def test_buy_completed(self, api_client, investor, fund):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType=BUY",
            _order_payload(investor.username, fund.fund_id),
            format="json",
        )

        assert res.status_code == 201
        body = res.json()
        assert body["code"] == 5010
        assert body["message"] == "Order completed successfully"
        assert Decimal(body["totalValue"]) == Decimal("123450")

        fund.refresh_from_db()
        assert fund.total_units == Decimal("3820")
        assert Holding.objects.get(user=investor).units == Decimal("1000")

    def test_redeem_completed(self, api_client, investor, fund):
        api_client.force_authenticate(user=investor)
        api_client.post(
            f"{ORDER_URL}?orderType=BUY",
            _order_payload(investor.username, fund.fund_id, units="10"),
            format="json",
        )
        res = api_client.post(
            f"{ORDER_URL}?orderType=redeem",
            _order_payload(investor.username, fund.fund_id, units="4"),
            format="json",
        )

        assert res.status_code == 201
        assert res.json()["code"] == 5010
        assert Holding.objects.get(user=investor).units == Decimal("6")
        assert FundTransaction.objects.count() == 2

    @pytest.mark.parametrize(
        "order_type,units,nav,code",
        [
            ("BUY", "1", "100", 5005),
            ("BUY", "4820", "123.45", 5009),
            ("REDEEM", "1", "123.45", 5008),
        ],
    )
    def test_business_failures(self, api_client, investor, fund, order_type, units, nav, code):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType={order_type}",
            _order_payload(investor.username, fund.fund_id, units=units, nav=nav),
            format="json",
        )

        assert res.status_code == 400
        assert res.json()["code"] == code
        assert not FundTransaction.objects.exists()

    def test_unknown_fund(self, api_client, investor):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType=BUY",
            _order_payload(investor.username, "NOPE"),
            format="json",
        )
        assert res.status_code == 400
        assert res.json()["code"] == 5006

    def test_order_for_another_user_is_forbidden(
        self, api_client, investor, other_investor, fund
    ):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType=BUY",
            _order_payload(other_investor.username, fund.fund_id),
            format="json",
        )

        assert res.status_code == 403
        assert res.json()["code"] == 403
        assert not Holding.objects.exists()

    def test_forbidden_even_with_invalid_payload(self, api_client, investor):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType=NONSENSE",
            {"username": "someone_else"},
            format="json",
        )
        assert res.status_code == 403
        assert res.json()["code"] == 403

    def test_invalid_order_type(self, api_client, investor, fund):
        api_client.force_authenticate(user=investor)
        res = api_client.post(
            f"{ORDER_URL}?orderType=SWITCH",
            _order_payload(investor.username, fund.fund_id),
            format="json",
        )

        assert res.status_code == 400
        body = res.json()
        assert body["code"] == 400
        assert "orderType" in body["errors"]

    def test_requires_user_role(self, api_client, fund_admin, fund):
        api_client.force_authenticate(user=fund_admin)
        res = api_client.post(
            f"{ORDER_URL}?orderType=BUY",
            _order_payload(fund_admin.username, fund.fund_id),
            format="json",
        )
        assert res.status_code == 403
        assert not FundTransaction.objects.exists()


@pytest.mark.django_db
class TestPlatformEndpoints:
    def test_version(self, client):
        res = client.get("/version")
        assert res.status_code == 200
        assert res.content == b"v1"

    def test_healthz(self, client):
        res = client.get("/healthz")
        assert res.json()["status"] == "ok"

    def test_request_id_is_echoed(self, client):
        res = client.get("/version", HTTP_X_REQUEST_ID="req-123")
        assert res["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client):
        res = client.get("/version")
        assert len(res["X-Request-ID"]) == 32
