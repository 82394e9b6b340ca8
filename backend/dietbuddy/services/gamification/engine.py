"""
Gamification Engine - health points, levels, achievements and quiz grading.
"""

import logging
from typing import Callable, Dict, List

from dietbuddy.storage import GAMIFICATION_KEY, LocalStore

from .models import (
    POINTS_PER_LEVEL,
    Achievement,
    AchievementId,
    GamificationSnapshot,
    GamificationState,
    QuizQuestion,
    QuizResult,
)

logger = logging.getLogger(__name__)

QUIZ_PARTICIPATION_POINTS = 5


# ============================================================================
# Achievements
# ============================================================================

def _first_chat(state: GamificationState) -> Achievement:
    return Achievement(
        id=AchievementId.FIRST_CHAT,
        title="First Conversation",
        description="Started your first chat with the nutrition assistant",
        points=10,
        unlocked=state.messages_sent > 0,
    )


def _quiz_master(state: GamificationState) -> Achievement:
    progress = min(5, state.quizzes_completed)
    return Achievement(
        id=AchievementId.QUIZ_MASTER,
        title="Quiz Master",
        description="Completed 5 nutrition quizzes",
        points=50,
        unlocked=progress >= 5,
        progress=progress,
        max_progress=5,
    )


def _streak_keeper(state: GamificationState) -> Achievement:
    return Achievement(
        id=AchievementId.STREAK_KEEPER,
        title="Streak Keeper",
        description="Maintained a 7-day learning streak",
        points=100,
        unlocked=state.streak >= 7,
        progress=min(7, state.streak),
        max_progress=7,
    )


def _health_champion(state: GamificationState) -> Achievement:
    return Achievement(
        id=AchievementId.HEALTH_CHAMPION,
        title="Health Champion",
        description="Reached 500 health points",
        points=0,
        unlocked=state.health_points >= 500,
        progress=min(500, state.health_points),
        max_progress=500,
    )


def _nutrition_expert(state: GamificationState) -> Achievement:
    return Achievement(
        id=AchievementId.NUTRITION_EXPERT,
        title="Nutrition Expert",
        description="Reached level 10",
        points=200,
        unlocked=state.level >= 10,
        progress=min(10, state.level),
        max_progress=10,
    )


ACHIEVEMENT_EVALUATORS: Dict[AchievementId, Callable[[GamificationState], Achievement]] = {
    AchievementId.FIRST_CHAT: _first_chat,
    AchievementId.QUIZ_MASTER: _quiz_master,
    AchievementId.STREAK_KEEPER: _streak_keeper,
    AchievementId.HEALTH_CHAMPION: _health_champion,
    AchievementId.NUTRITION_EXPERT: _nutrition_expert,
}

_missing = set(AchievementId) - set(ACHIEVEMENT_EVALUATORS)
if _missing:
    raise RuntimeError(f"No evaluator for achievements: {sorted(a.value for a in _missing)}")


def evaluate_achievements(state: GamificationState) -> List[Achievement]:
    return [ACHIEVEMENT_EVALUATORS[achievement_id](state) for achievement_id in AchievementId]


# ============================================================================
# Service
# ============================================================================

class GamificationService:
    """Persisted point counters and the derived progress view."""

    def __init__(self, store: LocalStore):
        self.store = store

    def load(self) -> GamificationState:
        data = self.store.get(GAMIFICATION_KEY)
        if data is None:
            return GamificationState()
        try:
            return GamificationState.model_validate(data)
        except ValueError as e:
            logger.error("Error loading gamification state: %s", e)
            return GamificationState()

    def save(self, state: GamificationState) -> GamificationState:
        self.store.set(GAMIFICATION_KEY, state.model_dump())
        return state

    def add_points(self, points: int) -> GamificationState:
        state = self.load()
        previous_level = state.level
        state.health_points = max(0, state.health_points + points)
        self.save(state)

        if state.level != previous_level:
            logger.info("Level changed %d -> %d", previous_level, state.level)
        return state

    def record_message(self) -> GamificationState:
        state = self.load()
        state.messages_sent += 1
        return self.save(state)

    def snapshot(self) -> GamificationSnapshot:
        state = self.load()
        into_level = state.health_points % POINTS_PER_LEVEL
        return GamificationSnapshot(
            health_points=state.health_points,
            level=state.level,
            streak=state.streak,
            points_to_next_level=POINTS_PER_LEVEL - into_level,
            level_progress_percent=into_level / POINTS_PER_LEVEL * 100,
            achievements=evaluate_achievements(state),
        )

    def answer_quiz(self, question: QuizQuestion, answer: str) -> QuizResult:
        """Grade an answer; correct earns the question's points, wrong earns participation points."""
        correct = answer.strip() == question.correct
        points = question.points if correct else QUIZ_PARTICIPATION_POINTS

        state = self.load()
        state.quizzes_completed += 1
        state.health_points += points
        self.save(state)

        logger.info("Quiz %d answered", question.id, extra={"correct": correct, "points": points})
        return QuizResult(
            question_id=question.id,
            correct=correct,
            correct_answer=question.correct,
            explanation=question.explanation,
            points_awarded=points,
            health_points=state.health_points,
            level=state.level,
        )
