from decimal import Decimal

from rest_framework import serializers

UNITS_MIN = Decimal("0.00000001")
NAV_MIN = Decimal("0.00000001")


class OrderSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    fundId = serializers.CharField(source="fund_id", max_length=64)
    units = serializers.DecimalField(max_digits=20, decimal_places=8, min_value=UNITS_MIN)
    nav = serializers.DecimalField(max_digits=18, decimal_places=8, min_value=NAV_MIN)
