import enum

import prometheus_client as prom

from .base import Request

latency_histogram = prom.Histogram(
    "aio_network_request_latency",
    "Duration of performed requests.",
    labelnames=(
        "request_method",
        "request_host",
        "outcome",
    ),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.075,
        0.1,
        0.15,
        0.2,
        0.25,
        0.3,
        0.35,
        0.4,
        0.45,
        0.5,
        0.75,
        1.0,
        5.0,
        10.0,
        15.0,
        20.0,
    ),
)


class Outcome(str, enum.Enum):
    SUCCEEDED = "succeeded"
    CONNECTIVITY = "connectivity"
    INVALID_RESPONSE = "invalid_response"


def capture_metrics(*, request: Request, outcome: Outcome, elapsed: float) -> None:
    label_values = (
        request.method,
        request.url.host or "",
        outcome.value,
    )
    latency_histogram.labels(*label_values).observe(elapsed)
