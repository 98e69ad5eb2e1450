"""
Monitoring Module.

Prometheus metrics of the scouts service, exposed in the text exposition
format on ``GET /metrics``:

- HTTP request counts, latencies and in-flight requests (recorded by the
  request middleware, labelled with the route template)
- Domain operations per entity (recorded by the application services)
- Errors by exception type (recorded by the exception handlers)
"""

from typing import Optional, Tuple

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

from .logging_config import get_logger

logger = get_logger(__name__)

METRIC_NAMESPACE = "scouts"

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status_code"],
    namespace=METRIC_NAMESPACE,
)
HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "path"],
    namespace=METRIC_NAMESPACE,
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)
HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "HTTP requests currently being served",
    namespace=METRIC_NAMESPACE,
)
DOMAIN_OPERATIONS_TOTAL = Counter(
    "domain_operations_total",
    "Successful domain operations by entity",
    ["entity", "operation"],
    namespace=METRIC_NAMESPACE,
)
ERRORS_TOTAL = Counter(
    "errors_total",
    "Errors by exception type",
    ["error_type"],
    namespace=METRIC_NAMESPACE,
)


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Record a served HTTP request.

    Args:
        method: HTTP method
        path: Route template (e.g. ``/api/v1/groups/{group_id}``) or raw path if unmatched
        status_code: Response status code
        duration_ms: Request duration in milliseconds
    """
    HTTP_REQUESTS_TOTAL.labels(method=method, path=path, status_code=str(status_code)).inc()
    HTTP_REQUEST_DURATION.labels(method=method, path=path).observe(duration_ms / 1000)
    logger.debug(f"API request: {method} {path} -> {status_code} ({duration_ms:.2f}ms)")


def record_entity_operation(entity: str, operation: str) -> None:
    """Count a successful create/update/delete-style operation on an entity."""
    DOMAIN_OPERATIONS_TOTAL.labels(entity=entity, operation=operation).inc()


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Record an error.

    Args:
        error_type: Type of error (usually the exception class name)
        error_message: Error message
        context: Additional context information
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()
    logger.debug(f"Error recorded: {error_type}: {error_message}", extra={"context": context or {}})


def render_metrics() -> Tuple[bytes, str]:
    """Render all registered metrics in the Prometheus text format.

    Returns:
        The payload and its content type.
    """
    return generate_latest(), CONTENT_TYPE_LATEST
