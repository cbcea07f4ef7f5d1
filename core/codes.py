from django.db import models


class ResultCode(models.IntegerChoices):
    """Numeric result codes returned in every API response body."""

    FUND_CREATED = 5001, "Fund created successfully."
    FUND_EXISTS = 5002, "Fund already exists with the provided Fund ID."
    NAV_UPDATED = 5003, "The fund's Net Asset Value (NAV) has been updated."
    USER_NOT_FOUND = 5004, "User not found for the given username."
    NAV_MISMATCH = 5005, "Fund NAV amount must correspond to today's date."
    FUND_NOT_FOUND = 5006, "Requested fund details are unavailable."
    INSUFFICIENT_USER_UNITS = 5008, "You do not have enough funds to place this sell order."
    INSUFFICIENT_FUND_UNITS = 5009, "Buy order failed: Insufficient funds."
    ORDER_COMPLETED = 5010, "Order completed successfully"

    BAD_REQUEST = 400, "Request payload failed validation."
    ACCESS_DENIED = (
        403,
        "Access denied: You are not authorized to create an order for another user.",
    )
    PROCESSING_FAILED = 5000, "Error while processing the request"


def result_body(code: ResultCode, **extra) -> dict:
    return {"code": int(code), "message": code.label, **extra}
