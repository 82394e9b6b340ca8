"""
Unit tests for the user profile model and its persistence.
"""

import pytest
from pydantic import ValidationError

from dietbuddy.services.profile.models import UserProfile, bmi_status
from dietbuddy.services.profile.profile_service import ProfileService
from dietbuddy.storage import (
    CHAT_HISTORY_KEY,
    GAMIFICATION_KEY,
    GENETIC_ANALYSIS_KEY,
    PROFILE_KEY,
    LocalStore,
)


class TestUserProfile:
    """Test defaults, validation and BMI."""

    def test_defaults(self):
        profile = UserProfile()
        assert (profile.age, profile.sex, profile.diet, profile.region) == (24, "Female", "Vegetarian", "Any")
        assert profile.budget == 70
        assert profile.allergies == "" and profile.goals == ""
        assert (profile.height, profile.weight) == (160, 60)

    def test_bmi(self):
        """60kg at 160cm -> 23.4, normal weight"""
        profile = UserProfile()
        assert profile.bmi == 23.4
        assert profile.bmi_status == "normal weight"

    @pytest.mark.parametrize("bmi,status", [
        (18.4, "underweight"),
        (18.5, "normal weight"),
        (24.9, "normal weight"),
        (25.0, "overweight"),
    ])
    def test_bmi_status_thresholds(self, bmi, status):
        assert bmi_status(bmi) == status

    @pytest.mark.parametrize("field,value", [
        ("age", 0),
        ("age", 121),
        ("budget", -1),
        ("height", 0),
        ("weight", 501),
    ])
    def test_range_validation(self, field, value):
        with pytest.raises(ValidationError):
            UserProfile(**{field: value})


class TestProfileService:
    """Test profile load/save/reset."""

    @pytest.fixture
    def store(self, tmp_path):
        return LocalStore(tmp_path)

    @pytest.fixture
    def service(self, store):
        return ProfileService(store)

    def test_defaults_when_nothing_saved(self, service):
        assert service.get_profile() == UserProfile()

    def test_save_and_load(self, service):
        profile = UserProfile(age=35, diet="Jain", region="Gujarat", allergies="peanuts")
        service.save_profile(profile)
        assert service.get_profile() == profile

    def test_invalid_saved_profile_falls_back_to_defaults(self, service, store):
        store.set(PROFILE_KEY, {"age": -5})
        assert service.get_profile() == UserProfile()

    def test_reset_clears_derived_state(self, service, store):
        """Reset drops the genetic result, chat history and points"""
        service.save_profile(UserProfile(age=50))
        store.set(GENETIC_ANALYSIS_KEY, {"x": 1})
        store.set(CHAT_HISTORY_KEY, [])
        store.set(GAMIFICATION_KEY, {"health_points": 120})

        profile = service.reset()

        assert profile == UserProfile()
        assert service.get_profile() == UserProfile()
        assert not store.contains(GENETIC_ANALYSIS_KEY)
        assert not store.contains(CHAT_HISTORY_KEY)
        assert not store.contains(GAMIFICATION_KEY)
