from fastapi import APIRouter
from dietbuddy.api.routes import chat, flavor_lab, gamification, genetics, health_monitoring, profile, traceability

api_router = APIRouter()

api_router.include_router(genetics.router, prefix="/genetics", tags=["Genetics"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
api_router.include_router(gamification.router, prefix="/gamification", tags=["Gamification"])
api_router.include_router(traceability.router, prefix="/traceability", tags=["Traceability"])
api_router.include_router(health_monitoring.router, prefix="/health-monitoring", tags=["Health Monitoring"])
api_router.include_router(flavor_lab.router, prefix="/flavor-lab", tags=["Flavor Lab"])
