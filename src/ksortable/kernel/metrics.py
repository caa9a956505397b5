"""
Prometheus metrics collection for ksortable.

Counters only; exposing them is up to the host application's exporter.
"""

from prometheus_client import Counter

ksuid_generated_total = Counter(
    "ksuid_generated_total",
    "Total number of identifiers generated",
    ["unit"],
)

ksuid_decode_failures_total = Counter(
    "ksuid_decode_failures_total",
    "Total number of encoded identifiers rejected on decode",
    ["reason"],  # reason: character, length, range, other
)


def record_generated(unit: str) -> None:
    ksuid_generated_total.labels(unit=unit).inc()


def record_decode_failure(reason: str) -> None:
    ksuid_decode_failures_total.labels(reason=reason).inc()
