import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from dietbuddy.api.deps import get_chat_service
from dietbuddy.services.chat.chat_service import ChatService
from dietbuddy.services.chat.meal_plan_parser import parse_meal_plan
from dietbuddy.services.chat.models import (
    ChatMessage,
    ChatRequest,
    MealPlanParseRequest,
    MealPlanParseResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/messages", response_model=ChatMessage)
async def send_message(request: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """
    Send one chat turn. Chat API failures come back as an assistant message,
    not as an HTTP error.
    """
    try:
        return await service.send_message(request.content)
    except Exception as e:
        logger.exception("Error handling chat turn")
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")


@router.get("/messages", response_model=List[ChatMessage])
async def get_history(service: ChatService = Depends(get_chat_service)):
    return service.get_history()


@router.delete("/messages")
async def clear_history(service: ChatService = Depends(get_chat_service)):
    service.clear_history()
    return {"cleared": True}


@router.post("/quick-actions/{action}", response_model=ChatMessage)
async def quick_action(action: str, service: ChatService = Depends(get_chat_service)):
    """
    Run a canned prompt: 3-day-plan, anemia-screen, nutrition-quiz or
    genetic-diet. Any other value is sent as free text.
    """
    try:
        return await service.quick_action(action)
    except Exception as e:
        logger.exception("Error handling quick action %s", action)
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")


@router.post("/meal-plan/parse", response_model=MealPlanParseResponse)
async def parse_plan(request: MealPlanParseRequest):
    return MealPlanParseResponse(days=parse_meal_plan(request.content))
