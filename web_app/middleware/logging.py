"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional


def status_class(status_code: int) -> str:
    return f"{status_code // 100}xx"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with the link code it touched.

    Redirects and misses are called out, and the level follows the status
    class: 5xx at ERROR, 4xx at WARNING, everything else at INFO.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("tinylink.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        # The router fills path_params on the shared scope once a route matches
        code = request.scope.get("path_params", {}).get("code")
        status = response.status_code

        outcome = ""
        if code and 300 <= status < 400:
            outcome = f" redirect {code} -> {response.headers.get('location', '')}"
        elif code and status == 404:
            outcome = f" miss {code}"
        elif code:
            outcome = f" code={code}"

        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        self.logger.log(
            level,
            f"{request.method} {request.url.path} {status} ({status_class(status)})"
            f"{outcome} {duration_ms:.2f}ms",
            extra={"code": code, "status": status},
        )

        return response
