import logging

from dietbuddy.storage import (
    CHAT_HISTORY_KEY,
    GAMIFICATION_KEY,
    GENETIC_ANALYSIS_KEY,
    PROFILE_KEY,
    LocalStore,
)

from .models import UserProfile

logger = logging.getLogger(__name__)

# Everything a profile reset wipes, besides the profile itself.
_RESET_KEYS = (GENETIC_ANALYSIS_KEY, CHAT_HISTORY_KEY, GAMIFICATION_KEY)


class ProfileService:
    """Load/save boundary for the user profile."""

    def __init__(self, store: LocalStore):
        self.store = store

    def get_profile(self) -> UserProfile:
        data = self.store.get(PROFILE_KEY)
        if data is None:
            return UserProfile()
        try:
            return UserProfile.model_validate(data)
        except ValueError as e:
            logger.error("Error loading saved profile, using defaults: %s", e)
            return UserProfile()

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self.store.set(PROFILE_KEY, profile.model_dump())
        logger.info("Profile saved", extra={"diet": profile.diet, "region": profile.region})
        return profile

    def reset(self) -> UserProfile:
        """Restore the default profile and drop all derived state."""
        for key in _RESET_KEYS:
            self.store.remove(key)
        profile = self.save_profile(UserProfile())
        logger.info("Profile reset to defaults")
        return profile
