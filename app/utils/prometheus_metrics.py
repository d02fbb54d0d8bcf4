"""
Prometheus metrics for the admin API.
"""
import re
from time import time
from typing import Callable

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# HTTP requests
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0]
)

http_errors_total = Counter(
    'http_errors_total',
    'Total HTTP errors',
    ['method', 'endpoint', 'status_code']
)

active_connections = Gauge(
    'active_connections',
    'Number of in-flight requests'
)

log_messages_total = Counter(
    'log_messages_total',
    'Total log messages',
    ['level']
)

# External collaborators (object storage, cache service)
external_calls_total = Counter(
    'external_calls_total',
    'Calls to external services',
    ['service', 'operation', 'outcome']
)

_UUID_RE = re.compile(r'/[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}')
_ID_RE = re.compile(r'/\d+')


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collects request metrics for every HTTP call."""

    async def dispatch(self, request: Request, call_next: Callable):
        # Skip the scrape endpoint and the log viewer
        if request.url.path.startswith("/api/monitoring"):
            return await call_next(request)

        method = request.method
        normalized_endpoint = normalize_endpoint(request.url.path)

        start_time = time()
        active_connections.inc()

        try:
            response = await call_next(request)
            status_code = response.status_code

            http_requests_total.labels(
                method=method,
                endpoint=normalized_endpoint,
                status_code=status_code
            ).inc()
            http_request_duration_seconds.labels(
                method=method,
                endpoint=normalized_endpoint
            ).observe(time() - start_time)

            if status_code >= 400:
                http_errors_total.labels(
                    method=method,
                    endpoint=normalized_endpoint,
                    status_code=status_code
                ).inc()

            return response

        except Exception:
            http_requests_total.labels(
                method=method,
                endpoint=normalized_endpoint,
                status_code=500
            ).inc()
            http_errors_total.labels(
                method=method,
                endpoint=normalized_endpoint,
                status_code=500
            ).inc()
            raise
        finally:
            active_connections.dec()


def normalize_endpoint(endpoint: str) -> str:
    """
    Replaces ids in a path to keep label cardinality low.
    Ex: /api/restaurants/admin/3f2c...-... -> /api/restaurants/admin/{uuid}
    """
    endpoint = _UUID_RE.sub('/{uuid}', endpoint)
    return _ID_RE.sub('/{id}', endpoint)


def get_metrics():
    """Returns the metrics in Prometheus exposition format."""
    return generate_latest()


def record_log(level: str):
    log_messages_total.labels(level=level).inc()


def record_external_call(service: str, operation: str, ok: bool):
    external_calls_total.labels(
        service=service,
        operation=operation,
        outcome="ok" if ok else "error",
    ).inc()
