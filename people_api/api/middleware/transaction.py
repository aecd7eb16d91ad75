"""Transaction id propagation and per-request logging."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("people_api.requests")

TRANSACTION_ID_HEADER = "X-Request-Id"


def new_transaction_id() -> str:
    return "tid_" + uuid.uuid4().hex[:10]


class TransactionIdMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's X-Request-Id (or mint one), echo it back and log the request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = request.headers.get(TRANSACTION_ID_HEADER) or new_transaction_id()
        request.state.trace_id = trace_id

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        response.headers[TRANSACTION_ID_HEADER] = trace_id
        logger.info(
            "%s %s -> %s in %.2fms transaction_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            trace_id,
        )
        return response
