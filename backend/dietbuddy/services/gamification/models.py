"""
Gamification models: persisted counters, the closed set of achievements and
typed quiz questions.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

POINTS_PER_LEVEL = 100


class GamificationState(BaseModel):
    """Counters persisted between sessions."""
    health_points: int = Field(default=0, ge=0)
    streak: int = Field(default=1, ge=0, description="Consecutive active days")
    quizzes_completed: int = Field(default=0, ge=0)
    messages_sent: int = Field(default=0, ge=0)

    @property
    def level(self) -> int:
        return self.health_points // POINTS_PER_LEVEL + 1


class AchievementId(str, Enum):
    """Every achievement the app can award."""
    FIRST_CHAT = "first_chat"
    QUIZ_MASTER = "quiz_master"
    STREAK_KEEPER = "streak_keeper"
    HEALTH_CHAMPION = "health_champion"
    NUTRITION_EXPERT = "nutrition_expert"


class Achievement(BaseModel):
    id: AchievementId
    title: str
    description: str
    points: int = Field(..., ge=0, description="Bonus points shown for the achievement")
    unlocked: bool
    progress: Optional[int] = None
    max_progress: Optional[int] = None


class GamificationSnapshot(BaseModel):
    """Everything the progress panel displays."""
    health_points: int
    level: int
    streak: int
    points_to_next_level: int
    level_progress_percent: float
    achievements: List[Achievement]


class QuizQuestion(BaseModel):
    id: int
    question: str
    options: List[str] = Field(..., min_length=2)
    correct: str
    explanation: str
    points: int = Field(..., ge=0)


class QuizResult(BaseModel):
    question_id: int
    correct: bool
    correct_answer: str
    explanation: str
    points_awarded: int
    health_points: int
    level: int
