"""
HTTP middleware — request logging with correlation IDs and timing.
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from infosec_quiz.quiz_logging import get_logger
from infosec_quiz.quiz_logging.logger import request_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Bind a request id for the duration of the request and log method, path, status and latency."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    t0 = time.perf_counter()
    with request_context(request_id):
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - t0) * 1000, 2),
        )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
