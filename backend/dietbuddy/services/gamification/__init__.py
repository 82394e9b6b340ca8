from .models import (
    Achievement,
    AchievementId,
    GamificationSnapshot,
    GamificationState,
    QuizQuestion,
    QuizResult,
)
from .engine import ACHIEVEMENT_EVALUATORS, GamificationService, evaluate_achievements
from .quiz_loader import QuizBank, get_quiz_bank, load_quiz_questions

__all__ = [
    "Achievement",
    "AchievementId",
    "GamificationSnapshot",
    "GamificationState",
    "QuizQuestion",
    "QuizResult",
    "ACHIEVEMENT_EVALUATORS",
    "GamificationService",
    "evaluate_achievements",
    "QuizBank",
    "get_quiz_bank",
    "load_quiz_questions",
]
