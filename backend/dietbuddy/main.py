import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dietbuddy.api.router import api_router
from dietbuddy.core import logging as _logging  # Initialize logging
from dietbuddy.core.config import get_config, load_config_from_env
from dietbuddy.services.gamification.quiz_loader import get_quiz_bank
from dietbuddy.services.traceability.catalog import get_product_catalog

logger = logging.getLogger(__name__)

app = FastAPI(
    title="DietBuddy API",
    description="Nutrition assistant with genetic trait analysis, chat guidance and gamified learning",
    version="1.0.0"
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    if load_config_from_env() is not None:
        _logging.configure_logging()

    # Preload packaged reference data
    get_quiz_bank()
    get_product_catalog()
    if not get_config().chat.api_key:
        logger.warning("CHAT_API_KEY not set; chat replies will use the local fallback")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "DietBuddy"}
