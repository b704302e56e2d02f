"""
Prometheus metrics for the booking flow.
Exposed at /metrics.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

booking_attempts = Counter(
    'booking_attempts_total',
    'Total room booking attempts',
    ['outcome']  # created, rejected, bad_request, not_found
)

booking_rejections = Counter(
    'booking_rejections_total',
    'Booking attempts refused by an eligibility or capacity check',
    ['reason']
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Time spent validating and creating a booking',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(outcome: str):
    """Outcome: created, rejected, bad_request, not_found"""
    booking_attempts.labels(outcome=outcome).inc()


def record_booking_rejection(reason: str):
    booking_rejections.labels(reason=reason).inc()
