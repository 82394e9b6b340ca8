"""
Unit tests for health points, levels, achievements and quiz grading.
"""

import json

import pytest
from dietbuddy.services.gamification.engine import (
    ACHIEVEMENT_EVALUATORS,
    QUIZ_PARTICIPATION_POINTS,
    GamificationService,
    evaluate_achievements,
)
from dietbuddy.services.gamification.models import AchievementId, GamificationState, QuizQuestion
from dietbuddy.services.gamification.quiz_loader import QuizBank, get_quiz_bank, load_quiz_questions
from dietbuddy.storage import LocalStore


@pytest.fixture
def service(tmp_path):
    """Create a GamificationService over an empty store."""
    return GamificationService(LocalStore(tmp_path))


class TestPointsAndLevels:
    """Test point accounting."""

    def test_initial_state(self, service):
        state = service.load()
        assert state.health_points == 0
        assert state.level == 1
        assert state.streak == 1

    def test_level_from_points(self):
        assert GamificationState(health_points=99).level == 1
        assert GamificationState(health_points=100).level == 2
        assert GamificationState(health_points=950).level == 10

    def test_add_points_persists(self, service):
        service.add_points(30)
        service.add_points(80)
        assert service.load().health_points == 110
        assert service.load().level == 2

    def test_points_never_negative(self, service):
        service.add_points(10)
        service.add_points(-50)
        assert service.load().health_points == 0

    def test_snapshot_progress(self, service):
        service.add_points(130)
        snapshot = service.snapshot()

        assert snapshot.level == 2
        assert snapshot.points_to_next_level == 70
        assert snapshot.level_progress_percent == pytest.approx(30.0)
        assert len(snapshot.achievements) == len(AchievementId)


class TestAchievements:
    """Test the closed achievement set."""

    def test_every_achievement_has_an_evaluator(self):
        assert set(ACHIEVEMENT_EVALUATORS) == set(AchievementId)

    def test_fresh_state_unlocks_nothing(self):
        achievements = evaluate_achievements(GamificationState())
        assert not any(a.unlocked for a in achievements)

    def test_first_chat(self, service):
        service.record_message()
        unlocked = {a.id for a in service.snapshot().achievements if a.unlocked}
        assert AchievementId.FIRST_CHAT in unlocked

    def test_progress_is_capped(self):
        state = GamificationState(health_points=2000, streak=12, quizzes_completed=9)
        by_id = {a.id: a for a in evaluate_achievements(state)}

        assert by_id[AchievementId.QUIZ_MASTER].progress == 5
        assert by_id[AchievementId.STREAK_KEEPER].progress == 7
        assert by_id[AchievementId.HEALTH_CHAMPION].progress == 500
        assert by_id[AchievementId.NUTRITION_EXPERT].progress == 10
        assert all(a.unlocked for a in by_id.values() if a.id != AchievementId.FIRST_CHAT)


class TestQuiz:
    """Test quiz loading and grading."""

    @pytest.fixture
    def question(self):
        return QuizQuestion(
            id=7,
            question="Which food improves iron absorption?",
            options=["Tea", "Lemon"],
            correct="Lemon",
            explanation="Vitamin C helps.",
            points=20,
        )

    def test_correct_answer_awards_question_points(self, service, question):
        result = service.answer_quiz(question, " Lemon ")

        assert result.correct is True
        assert result.points_awarded == 20
        assert result.health_points == 20
        assert service.load().quizzes_completed == 1

    def test_wrong_answer_awards_participation_points(self, service, question):
        result = service.answer_quiz(question, "Tea")

        assert result.correct is False
        assert result.points_awarded == QUIZ_PARTICIPATION_POINTS
        assert result.correct_answer == "Lemon"
        assert result.explanation == "Vitamin C helps."

    def test_packaged_bank(self):
        bank = get_quiz_bank()
        assert [q.id for q in bank.all()] == [1, 2, 3]
        assert bank.get(1).correct == "Lemon"
        assert bank.get(99) is None

    def test_loader_rejects_answer_not_in_options(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps([{
            "id": 1,
            "question": "?",
            "options": ["A", "B"],
            "correct": "C",
            "explanation": "",
            "points": 5,
        }]))
        with pytest.raises(ValueError, match="not an option"):
            load_quiz_questions(path)

    def test_bank_lookup(self, question):
        bank = QuizBank([question])
        assert bank.get(7) is question
