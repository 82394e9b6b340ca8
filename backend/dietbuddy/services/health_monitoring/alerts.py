"""
Health Monitoring - classify vital-sign readings and derive dietary alerts.

Thresholds:
- Blood pressure: high above 140/90, elevated above 120/80
- Glucose: high above 140 mg/dL, low below 80 mg/dL
- Heart rate: high above 100 bpm, low below 60 bpm
- Oxygen saturation: low below 95%
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

MetricStatus = Literal["normal", "elevated", "high", "low"]
AlertType = Literal["warning", "critical", "info"]


# ============================================================================
# Data Models
# ============================================================================

class HealthMetrics(BaseModel):
    """One reading from a connected device."""
    systolic: float = Field(..., ge=0, description="Systolic blood pressure (mmHg)")
    diastolic: float = Field(..., ge=0, description="Diastolic blood pressure (mmHg)")
    glucose: float = Field(..., ge=0, description="Blood glucose (mg/dL)")
    heart_rate: float = Field(..., ge=0, description="Heart rate (bpm)")
    oxygen: float = Field(..., ge=0, le=100, description="Oxygen saturation (%)")
    timestamp: Optional[str] = Field(None, description="ISO timestamp of the reading")


class HealthAlert(BaseModel):
    type: AlertType
    message: str
    recommendation: str
    timestamp: str


class MetricStatuses(BaseModel):
    blood_pressure: MetricStatus
    glucose: MetricStatus
    heart_rate: MetricStatus
    oxygen: MetricStatus


class HealthEvaluation(BaseModel):
    metrics: HealthMetrics
    statuses: MetricStatuses
    alerts: List[HealthAlert]


# ============================================================================
# Classification
# ============================================================================

def blood_pressure_status(systolic: float, diastolic: float) -> MetricStatus:
    if systolic > 140 or diastolic > 90:
        return "high"
    if systolic > 120 or diastolic > 80:
        return "elevated"
    return "normal"


def glucose_status(glucose: float) -> MetricStatus:
    if glucose > 140:
        return "high"
    if glucose < 80:
        return "low"
    return "normal"


def heart_rate_status(heart_rate: float) -> MetricStatus:
    if heart_rate > 100:
        return "high"
    if heart_rate < 60:
        return "low"
    return "normal"


def oxygen_status(oxygen: float) -> MetricStatus:
    return "low" if oxygen < 95 else "normal"


def classify_metrics(metrics: HealthMetrics) -> MetricStatuses:
    return MetricStatuses(
        blood_pressure=blood_pressure_status(metrics.systolic, metrics.diastolic),
        glucose=glucose_status(metrics.glucose),
        heart_rate=heart_rate_status(metrics.heart_rate),
        oxygen=oxygen_status(metrics.oxygen),
    )


# ============================================================================
# Alerts
# ============================================================================

def generate_alerts(metrics: HealthMetrics) -> List[HealthAlert]:
    """
    Build the alerts for a reading, in the order blood pressure, glucose,
    heart rate, oxygen. Elevated blood pressure and low heart rate are
    reported through their status only.
    """
    timestamp = metrics.timestamp or datetime.now().isoformat()
    statuses = classify_metrics(metrics)
    alerts: List[HealthAlert] = []

    def add(alert_type: AlertType, message: str, recommendation: str) -> None:
        alerts.append(HealthAlert(
            type=alert_type,
            message=message,
            recommendation=recommendation,
            timestamp=timestamp,
        ))

    if statuses.blood_pressure == "high":
        add(
            "critical",
            f"High blood pressure detected ({metrics.systolic:g}/{metrics.diastolic:g} mmHg)",
            "Avoid salty or fried foods. Consider light exercise and reduce sodium intake.",
        )

    if statuses.glucose == "high":
        add(
            "warning",
            f"Elevated blood glucose ({metrics.glucose:g} mg/dL)",
            "Prefer a light protein snack instead of carbs. Avoid sugary foods.",
        )
    elif statuses.glucose == "low":
        add(
            "warning",
            f"Low blood glucose ({metrics.glucose:g} mg/dL)",
            "Have a small healthy snack with natural sugars like fruits.",
        )

    if statuses.heart_rate == "high":
        add(
            "warning",
            f"Elevated heart rate ({metrics.heart_rate:g} bpm)",
            "Avoid caffeine until heart rate stabilizes. Consider deep breathing.",
        )

    if statuses.oxygen == "low":
        add(
            "critical",
            f"Low oxygen saturation ({metrics.oxygen:g}%)",
            "Take slow, deep breaths. Consider iron-rich foods to support oxygen transport.",
        )

    return alerts


def evaluate_metrics(metrics: HealthMetrics) -> HealthEvaluation:
    return HealthEvaluation(
        metrics=metrics,
        statuses=classify_metrics(metrics),
        alerts=generate_alerts(metrics),
    )
