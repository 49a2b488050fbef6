from __future__ import annotations

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from srtview.api.metrics import inc_http_request
from srtview.utils.logger import get_logger, get_trace_id

logger = get_logger("srtview.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One ACCESS line and one srtview_http_requests_total increment per request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path

        status = 500
        try:
            resp = await call_next(request)
            status = resp.status_code
            return resp
        finally:
            dur_ms = (time.perf_counter() - start) * 1000.0
            inc_http_request(method=method, path=path, status=status)
            logger.info(
                "ACCESS method=%s path=%s status=%s dur_ms=%.2f trace=%s",
                method,
                path,
                status,
                dur_ms,
                get_trace_id(),
            )
