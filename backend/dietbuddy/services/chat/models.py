from datetime import datetime, timezone
from typing import List, Literal, Optional
import uuid

from pydantic import BaseModel, Field


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Literal["user", "assistant"]
    content: str
    timestamp: str = Field(default_factory=_now_iso)
    points_awarded: Optional[int] = None


class ChatRequest(BaseModel):
    content: str = Field(..., min_length=1, description="User message text")


class ParsedMeal(BaseModel):
    type: str = Field(..., description="breakfast, lunch, dinner or snack")
    name: str
    ingredients: str
    cost: float
    preparation: str


class ParsedDay(BaseModel):
    day: int
    meals: List[ParsedMeal]


class MealPlanParseRequest(BaseModel):
    content: str


class MealPlanParseResponse(BaseModel):
    days: Optional[List[ParsedDay]] = None
