"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

from weatherfit.config.settings import get_settings

_namespace = get_settings().metrics_namespace

comfort_evaluations_total = Counter(
    "comfort_evaluations_total",
    "Total number of comfort score evaluations.",
    namespace=_namespace,
)

comfort_score = Histogram(
    "comfort_total_score",
    "Distribution of personalised total comfort scores.",
    namespace=_namespace,
    buckets=(10, 30, 50, 70, 90, 100),
)

outfit_recommendations_total = Counter(
    "outfit_recommendations_total",
    "Total number of clothing recommendations by top category.",
    ["top_category"],
    namespace=_namespace,
)

feedback_events_total = Counter(
    "feedback_events_total",
    "Total number of processed feedback events by type.",
    ["feedback_type"],
    namespace=_namespace,
)

learning_updates_applied_total = Counter(
    "learning_updates_applied_total",
    "Number of feedback events that changed a comfort profile.",
    namespace=_namespace,
)
