"""Prometheus metrics for monitoring backend actor calls and page submissions"""

from prometheus_client import Counter, Histogram

# Page submission metrics
view_update_counter = Counter(
    "digital_world_view_update_total",
    "Page submissions applied to the view state",
    ["operation", "outcome"],  # greet | buy_item | claim_sale, success | failure
)

# Actor metrics
actor_call_counter = Counter(
    "digital_world_actor_call_total",
    "Calls issued to the backend actor",
    ["method", "outcome"],  # replied | rejected | err | transport_error | invalid_argument
)

actor_latency_histogram = Histogram(
    "digital_world_actor_latency_seconds",
    "Backend actor response time",
    ["method"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_view_update(operation: str, outcome: str) -> None:
    """Record one applied page submission"""
    view_update_counter.labels(operation=operation, outcome=outcome).inc()


def record_actor_call(method: str, outcome: str) -> None:
    """Record the outcome of one backend actor call"""
    actor_call_counter.labels(method=method, outcome=outcome).inc()
