from __future__ import annotations

from collections import deque
from contextvars import ContextVar
from dataclasses import asdict, dataclass
from typing import Protocol

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

LATENCY_BUCKETS_MS = (1, 5, 10, 25, 50, 100, 250, 500, 1000)

_current_trace_id: ContextVar[str] = ContextVar("safety_api_trace_id", default="")


def set_trace_id(trace_id: str) -> None:
    _current_trace_id.set(trace_id)


def get_trace_id() -> str:
    return _current_trace_id.get()


@dataclass(frozen=True)
class RequestMetric:
    method: str
    path: str
    status_code: int
    duration_ms: float
    trace_id: str


class MetricCollector(Protocol):
    def observe(self, metric: RequestMetric) -> None: ...


class RecentRequestsCollector:
    """Keeps the latest request metrics for debugging and tests."""

    def __init__(self, max_items: int = 1000) -> None:
        self._metrics: deque[RequestMetric] = deque(maxlen=max_items)

    def observe(self, metric: RequestMetric) -> None:
        self._metrics.append(metric)

    def snapshot(self) -> list[dict]:
        return [asdict(item) for item in self._metrics]


class PrometheusMetricsCollector:
    def __init__(self, namespace: str = "safety_api") -> None:
        self.registry = CollectorRegistry()
        self._requests = Counter(
            f"{namespace}_http_requests_total",
            "HTTP requests served, by route and status",
            labelnames=("method", "path", "status_code"),
            registry=self.registry,
        )
        self._latency = Histogram(
            f"{namespace}_http_request_duration_ms",
            "HTTP request latency in milliseconds",
            labelnames=("method", "path"),
            buckets=LATENCY_BUCKETS_MS,
            registry=self.registry,
        )

    def observe(self, metric: RequestMetric) -> None:
        self._requests.labels(metric.method, metric.path, str(metric.status_code)).inc()
        self._latency.labels(metric.method, metric.path).observe(metric.duration_ms)

    def render(self) -> bytes:
        return generate_latest(self.registry)
