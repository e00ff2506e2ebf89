"""Prometheus metrics for the application."""

import time

from prometheus_client import Counter, Histogram, Info, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app import __version__

# --- Metrics ---

APP_INFO = Info("app", "Domain Insight scoring service info")
APP_INFO.info({"version": __version__, "name": "domain_insight"})

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
)

RESPONSES_SCORED = Counter(
    "responses_scored_total",
    "Engine responses run through the scoring pipeline",
    ["engine"],
)

PERFORMANCE_SCORE = Histogram(
    "response_performance_score",
    "Distribution of composite performance scores",
    ["engine"],
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

ENGINE_FAILURES = Counter(
    "engine_failures_total",
    "Engine calls that raised instead of returning text",
    ["engine", "kind"],
)


def record_score(engine: str, performance_score: int) -> None:
    RESPONSES_SCORED.labels(engine=engine).inc()
    PERFORMANCE_SCORE.labels(engine=engine).observe(performance_score)


# --- Middleware ---


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collect HTTP request metrics for Prometheus."""

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        path = request.url.path

        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        REQUEST_COUNT.labels(method=method, path=path, status=response.status_code).inc()
        REQUEST_DURATION.labels(method=method, path=path).observe(duration)

        return response


def metrics_response() -> Response:
    """Generate Prometheus /metrics response."""
    return Response(
        content=generate_latest(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
