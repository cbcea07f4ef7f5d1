from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.codes import ResultCode, result_body

log = logging.getLogger(__name__)


class BackOfficeError(Exception):
    """
    Base for business-rule failures.

    Each subclass maps to a fixed ResultCode and HTTP status; the API
    renders it as {code, message} instead of a protocol error.
    """

    result = ResultCode.PROCESSING_FAILED
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.result.label
        super().__init__(self.detail)

    @property
    def code(self) -> int:
        return int(self.result)

    @property
    def message(self) -> str:
        return self.result.label


class FundAlreadyExists(BackOfficeError):
    result = ResultCode.FUND_EXISTS
    status_code = status.HTTP_200_OK


class FundNotFound(BackOfficeError):
    result = ResultCode.FUND_NOT_FOUND


class UserNotFound(BackOfficeError):
    result = ResultCode.USER_NOT_FOUND


class NavMismatch(BackOfficeError):
    result = ResultCode.NAV_MISMATCH


class InsufficientUserUnits(BackOfficeError):
    result = ResultCode.INSUFFICIENT_USER_UNITS


class InsufficientFundUnits(BackOfficeError):
    result = ResultCode.INSUFFICIENT_FUND_UNITS


def api_exception_handler(exc, context):
    if isinstance(exc, BackOfficeError):
        return Response(result_body(exc.result), status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, (ValidationError, ParseError)):
            response.data = result_body(ResultCode.BAD_REQUEST, errors=response.data)
        else:
            detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
            response.data = {"code": response.status_code, "message": str(detail)}
        return response

    view = context.get("view")
    log.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
    return Response(
        result_body(ResultCode.PROCESSING_FAILED),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
