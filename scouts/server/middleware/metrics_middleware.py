"""
Metrics Middleware for FastAPI.

Records Prometheus metrics for every HTTP request:
- request count by method, route template and status code
- request latency
- number of in-flight requests

Slow and failing requests are logged as well.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from scouts.core.logging_config import get_logger
from scouts.core.monitoring import HTTP_REQUESTS_IN_PROGRESS, log_api_request

logger = get_logger(__name__)

SLOW_REQUEST_MS = 1000


def _route_path(request: Request) -> str:
    """
    Route template of the request, e.g. ``/api/v1/groups/{group_id}``.

    Unmatched requests are labelled with their raw path.
    """
    route = request.scope.get("route")
    template = getattr(route, "path_format", None)
    if template is None:
        return request.url.path
    # Routes of an included router may only know the template relative to the
    # router prefix; the prefix segments are taken from the requested path.
    path_segments = request.url.path.rstrip("/").split("/")
    template_segments = template.rstrip("/").split("/")
    if len(template_segments) >= len(path_segments):
        return template
    prefix = path_segments[: len(path_segments) - len(template_segments) + 1]
    return "/".join(prefix + template_segments[1:])


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware recording request metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and record metrics.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()
        method = request.method

        HTTP_REQUESTS_IN_PROGRESS.inc()
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            path = _route_path(request)
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={"method": method, "path": path, "duration_ms": duration_ms, "error": str(e)},
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise
        finally:
            HTTP_REQUESTS_IN_PROGRESS.dec()

        duration_ms = (time.perf_counter() - start_time) * 1000
        path = _route_path(request)
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)
        response.headers["X-Process-Time"] = str(duration_ms)

        if duration_ms > SLOW_REQUEST_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
