from __future__ import annotations

import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from srtview.utils.logger import clear_trace_id, set_trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (client-supplied X-Request-Id or a fresh hex
    uuid) so parser and viewer log lines for one upload can be grepped together.
    The id is echoed back and is listed in the CORS expose_headers.
    """

    def __init__(self, app, header_name: str = "X-Request-Id") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next) -> Response:
        rid = request.headers.get(self.header_name)
        if not rid:
            rid = uuid.uuid4().hex

        request.state.request_id = rid

        set_trace_id(rid)
        try:
            resp: Response = await call_next(request)
        finally:
            clear_trace_id()

        resp.headers[self.header_name] = rid
        return resp


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
