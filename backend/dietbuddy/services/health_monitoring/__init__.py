from .alerts import (
    HealthAlert,
    HealthEvaluation,
    HealthMetrics,
    MetricStatuses,
    classify_metrics,
    evaluate_metrics,
    generate_alerts,
)

__all__ = [
    "HealthAlert",
    "HealthEvaluation",
    "HealthMetrics",
    "MetricStatuses",
    "classify_metrics",
    "evaluate_metrics",
    "generate_alerts",
]
