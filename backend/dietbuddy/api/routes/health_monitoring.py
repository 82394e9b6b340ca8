from fastapi import APIRouter

from dietbuddy.services.health_monitoring.alerts import HealthEvaluation, HealthMetrics, evaluate_metrics

router = APIRouter()


@router.post("/evaluate", response_model=HealthEvaluation)
async def evaluate(metrics: HealthMetrics):
    """Classify a vital-signs reading and return dietary alerts."""
    return evaluate_metrics(metrics)
