"""Prometheus metrics for the cookbook.

Counts singleton constructions per holder. The /metrics endpoint serves
these in Prometheus exposition format.
"""
from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    generate_latest,
)


singleton_constructions = Counter(
    "cookbook_singleton_constructions_total",
    "Total singleton instances constructed",
    ["holder"],
)

singleton_construction_failures = Counter(
    "cookbook_singleton_construction_failures_total",
    "Total singleton factory failures",
    ["holder"],
)


def get_metrics() -> tuple[bytes, str]:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
