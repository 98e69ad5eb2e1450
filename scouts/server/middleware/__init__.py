from .metrics_middleware import MetricsMiddleware

__all__ = ["MetricsMiddleware"]
