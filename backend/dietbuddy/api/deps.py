"""
FastAPI dependency providers. Routes receive services through ``Depends`` so
tests can swap the store or the chat client with ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from dietbuddy.services.chat.chat_service import ChatService
from dietbuddy.services.gamification.engine import GamificationService
from dietbuddy.services.gamification.quiz_loader import QuizBank, get_quiz_bank
from dietbuddy.services.genetics.analysis import GeneticAnalysisService
from dietbuddy.services.llm.chat_client import ChatCompletionClient, OpenAIChatClient
from dietbuddy.services.profile.profile_service import ProfileService
from dietbuddy.services.traceability.catalog import ProductCatalog, get_product_catalog
from dietbuddy.storage import LocalStore, get_local_store


def get_store() -> LocalStore:
    return get_local_store()


def get_gamification_service(store: LocalStore = Depends(get_store)) -> GamificationService:
    return GamificationService(store)


@lru_cache(maxsize=None)
def _genetics_service_for(store: LocalStore) -> GeneticAnalysisService:
    # One instance per store so every request shares the upload lock.
    return GeneticAnalysisService(store, gamification=GamificationService(store))


def get_genetics_service(store: LocalStore = Depends(get_store)) -> GeneticAnalysisService:
    return _genetics_service_for(store)


def get_profile_service(store: LocalStore = Depends(get_store)) -> ProfileService:
    return ProfileService(store)


def get_chat_client() -> ChatCompletionClient:
    return OpenAIChatClient()


def get_chat_service(
    store: LocalStore = Depends(get_store),
    client: ChatCompletionClient = Depends(get_chat_client),
    profiles: ProfileService = Depends(get_profile_service),
    genetics: GeneticAnalysisService = Depends(get_genetics_service),
    gamification: GamificationService = Depends(get_gamification_service),
) -> ChatService:
    return ChatService(store, client, profiles, genetics, gamification)


def get_quiz() -> QuizBank:
    return get_quiz_bank()


def get_catalog() -> ProductCatalog:
    return get_product_catalog()
