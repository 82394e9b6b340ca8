from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from dietbuddy.api.deps import get_gamification_service, get_quiz
from dietbuddy.services.gamification.engine import GamificationService
from dietbuddy.services.gamification.models import GamificationSnapshot, QuizResult
from dietbuddy.services.gamification.quiz_loader import QuizBank

router = APIRouter()


class QuizQuestionView(BaseModel):
    """A quiz question without its answer."""
    id: int
    question: str
    options: List[str]
    points: int


class QuizAnswerRequest(BaseModel):
    answer: str = Field(..., description="The selected option text")


@router.get("", response_model=GamificationSnapshot)
async def get_progress(service: GamificationService = Depends(get_gamification_service)):
    return service.snapshot()


@router.get("/quiz", response_model=List[QuizQuestionView])
async def list_quiz(bank: QuizBank = Depends(get_quiz)):
    return [QuizQuestionView(id=q.id, question=q.question, options=q.options, points=q.points) for q in bank.all()]


@router.post("/quiz/{question_id}/answer", response_model=QuizResult)
async def answer_quiz(
    question_id: int,
    request: QuizAnswerRequest,
    bank: QuizBank = Depends(get_quiz),
    service: GamificationService = Depends(get_gamification_service),
):
    question = bank.get(question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=f"Quiz question {question_id} not found")
    return service.answer_quiz(question, request.answer)
