from decimal import Decimal

from rest_framework import serializers

UNITS_MIN = Decimal("0")
NAV_MIN = Decimal("0.00000001")


class FundSerializer(serializers.Serializer):
    fundId = serializers.CharField(source="fund_id", read_only=True)
    fundName = serializers.CharField(source="fund_name", read_only=True)
    totalUnits = serializers.DecimalField(
        source="total_units", max_digits=20, decimal_places=8, read_only=True
    )


class FundRegistrationSerializer(serializers.Serializer):
    fundId = serializers.CharField(source="fund_id", max_length=64)
    fundName = serializers.CharField(source="fund_name", max_length=255)
    totalUnits = serializers.DecimalField(
        source="total_units", max_digits=20, decimal_places=8, min_value=UNITS_MIN
    )
    nav = serializers.DecimalField(max_digits=18, decimal_places=8, min_value=NAV_MIN)
    navDate = serializers.DateField(source="nav_date")


class NavUpdateSerializer(serializers.Serializer):
    nav = serializers.DecimalField(max_digits=18, decimal_places=8, min_value=NAV_MIN)
    navDate = serializers.DateField(source="nav_date")
