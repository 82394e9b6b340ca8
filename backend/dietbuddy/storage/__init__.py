from .local_store import (
    CHAT_HISTORY_KEY,
    GAMIFICATION_KEY,
    GENETIC_ANALYSIS_KEY,
    PROFILE_KEY,
    LocalStore,
    StorageError,
    get_local_store,
)

__all__ = [
    "LocalStore",
    "StorageError",
    "get_local_store",
    "GENETIC_ANALYSIS_KEY",
    "PROFILE_KEY",
    "GAMIFICATION_KEY",
    "CHAT_HISTORY_KEY",
]
