from core.codes import ResultCode, result_body
from core.permissions import IsFundAdmin
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from valuations.services.nav import record_nav

from funds.serializers import (
    FundRegistrationSerializer,
    FundSerializer,
    NavUpdateSerializer,
)
from funds.services.registry import register_fund


class FundRegistrationView(APIView):
    """POST /v1/api/funds: register a fund and seed its first NAV."""

    permission_classes = [IsFundAdmin]

    def post(self, request):
        serializer = FundRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        fund = register_fund(**serializer.validated_data)

        return Response(
            result_body(ResultCode.FUND_CREATED, fund=FundSerializer(fund).data),
            status=status.HTTP_201_CREATED,
        )


class FundNavUpdateView(APIView):
    """PUT /v1/api/funds/<fund_id>: publish a NAV for a date."""

    permission_classes = [IsFundAdmin]

    def put(self, request, fund_id):
        serializer = NavUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        record_nav(fund_id=fund_id, **serializer.validated_data)

        return Response(
            result_body(ResultCode.NAV_UPDATED),
            status=status.HTTP_201_CREATED,
        )
