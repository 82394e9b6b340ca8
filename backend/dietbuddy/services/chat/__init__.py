from .models import ChatMessage, ChatRequest, MealPlanParseRequest, MealPlanParseResponse, ParsedDay, ParsedMeal
from .chat_service import ChatService, LOCAL_FALLBACK_RESPONSE
from .meal_plan_parser import parse_meal_plan

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "MealPlanParseRequest",
    "MealPlanParseResponse",
    "ParsedDay",
    "ParsedMeal",
    "ChatService",
    "LOCAL_FALLBACK_RESPONSE",
    "parse_meal_plan",
]
