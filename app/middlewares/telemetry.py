from __future__ import annotations

import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import (
    REQUEST_ID_HEADER,
    bind_request_context,
    clear_request_context,
    get_logger,
)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 2)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """One ``request.end`` line per request, tagged with its request id.

    Client errors (4xx) log at info, server errors at error level; an
    exception escaping the app logs ``request.failed`` with the traceback.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = bind_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            method=request.method,
            path=request.url.path,
        )
        log = get_logger()
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                log.exception("request.failed", duration_ms=_elapsed_ms(started))
                raise

            response.headers[REQUEST_ID_HEADER] = rid
            route = request.scope.get("route")
            emit = log.error if response.status_code >= 500 else log.info
            emit(
                "request.end",
                status_code=response.status_code,
                route=getattr(route, "path", None),
                duration_ms=_elapsed_ms(started),
            )
            return response
        finally:
            clear_request_context()
