import logging

from core.codes import ResultCode, result_body
from core.permissions import IsInvestor
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import OrderType
from accounts.serializers import OrderSerializer
from accounts.services.orders import place_order

log = logging.getLogger(__name__)


class OrderCreateView(APIView):
    """POST /v1/api/funds/order?orderType=BUY|REDEEM"""

    permission_classes = [IsInvestor]

    def post(self, request):
        # Identity is checked before the payload is validated.
        payload_username = request.data.get("username") if hasattr(request.data, "get") else None
        if request.user.username != payload_username:
            log.warning(
                "Order rejected: caller=%s attempted order for username=%s",
                request.user.username,
                payload_username,
            )
            return Response(
                result_body(ResultCode.ACCESS_DENIED),
                status=status.HTTP_403_FORBIDDEN,
            )

        try:
            order_type = OrderType.parse(request.query_params.get("orderType"))
        except ValueError:
            raise serializers.ValidationError(
                {"orderType": [f"Must be one of: {', '.join(OrderType.values)}."]}
            )

        serializer = OrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = place_order(order_type=order_type, **serializer.validated_data)

        return Response(
            result_body(ResultCode.ORDER_COMPLETED, totalValue=str(result.amount)),
            status=status.HTTP_201_CREATED,
        )
