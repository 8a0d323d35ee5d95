"""
Prometheus metrics for password-validator

Counters live in a dedicated registry so the host application decides
whether and how to expose them.
"""
from prometheus_client import (
    Counter,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

validations_total = Counter(
    name="password_validations_total",
    documentation="Total number of password validations",
    labelnames=["result"],  # result: passed, failed, absent
    registry=REGISTRY,
)

rule_failures_total = Counter(
    name="password_rule_failures_total",
    documentation="Total number of individual rule failures",
    labelnames=["rule_type"],
    registry=REGISTRY,
)


# =======================
# EXPORT FUNCTIONS
# =======================

def get_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the text exposition format."""
    return CONTENT_TYPE_LATEST


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_validation(result: str) -> None:
    """Record one validation outcome (passed, failed or absent)."""
    increment_counter(validations_total, 1, result=result)


def record_rule_failure(rule_type: str) -> None:
    """Record a single failing rule."""
    increment_counter(rule_failures_total, 1, rule_type=rule_type)


def get_sample_value(name: str, labels: dict[str, str]) -> float:
    """
    Current value of a sample in the registry (0.0 if never recorded).

    Args:
        name: Sample name, e.g. "password_validations_total"
        labels: Label values identifying the sample
    """
    value = REGISTRY.get_sample_value(name, labels)
    return value if value is not None else 0.0
