from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar

log = logging.getLogger(__name__)

_request_id: ContextVar[str] = ContextVar("request_id", default="-")

REQUEST_ID_HEADER = "X-Request-ID"


def current_request_id() -> str:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Stamp the active request id on every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        return True


class RequestLogMiddleware:
    """
    Tag each request with an id (taken from X-Request-ID or generated),
    log receipt and completion, and echo the id back on the response.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = (request.headers.get(REQUEST_ID_HEADER) or "").strip() or uuid.uuid4().hex
        token = _request_id.set(request_id)
        request.request_id = request_id

        start = time.monotonic()
        log.info("Request received: %s %s", request.method, request.path)
        try:
            response = self.get_response(request)
            elapsed = round((time.monotonic() - start) * 1000, 2)
            log.info(
                "Request completed: %s %s status=%s ms=%s",
                request.method,
                request.path,
                response.status_code,
                elapsed,
            )
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            _request_id.reset(token)
