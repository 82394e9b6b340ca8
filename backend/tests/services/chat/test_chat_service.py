"""
Tests for chat turns, history and quick actions using a fake completion client.
"""

import asyncio

import pytest
from dietbuddy.services.chat.chat_service import (
    AI_REPLY_POINTS,
    ENGAGEMENT_POINTS,
    LOCAL_FALLBACK_RESPONSE,
    LOCAL_REPLY_POINTS,
    QUIZ_ACTION_POINTS,
    ChatService,
)
from dietbuddy.services.gamification.engine import GamificationService
from dietbuddy.services.genetics.analysis import GeneticAnalysisService
from dietbuddy.services.llm.chat_client import ChatCompletion
from dietbuddy.services.profile.models import UserProfile
from dietbuddy.services.profile.profile_service import ProfileService
from dietbuddy.storage import LocalStore


class FakeChatClient:
    """Records prompts and returns a canned completion."""

    def __init__(self, completion=None, configured=True):
        self.completion = completion or ChatCompletion(text="Try ragi dosa.")
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self):
        return self.configured

    async def send_chat_completion(self, system_prompt, user_message):
        self.calls.append((system_prompt, user_message))
        return self.completion


@pytest.fixture
def store(tmp_path):
    return LocalStore(tmp_path)


def build_service(store, client):
    gamification = GamificationService(store)
    return ChatService(
        store,
        client,
        ProfileService(store),
        GeneticAnalysisService(store, gamification=gamification),
        gamification,
    )


class TestSendMessage:
    """Test a single conversation turn."""

    def test_ai_reply(self, store):
        client = FakeChatClient()
        service = build_service(store, client)

        reply = asyncio.run(service.send_message("What should I eat?"))

        assert reply.role == "assistant"
        assert reply.content.startswith("Current Profile Used:")
        assert reply.content.endswith("Try ragi dosa.")
        assert reply.points_awarded == AI_REPLY_POINTS

        system_prompt, user_message = client.calls[0]
        assert "Vegetarian" in system_prompt
        assert user_message.startswith("What should I eat?\n\nUSER CONTEXT:")

    def test_points_and_history(self, store):
        service = build_service(store, FakeChatClient())
        asyncio.run(service.send_message("Hello"))

        history = service.get_history()
        assert [m.role for m in history] == ["user", "assistant"]
        assert history[0].content == "Hello"

        state = GamificationService(store).load()
        assert state.health_points == ENGAGEMENT_POINTS + AI_REPLY_POINTS
        assert state.messages_sent == 1

    def test_unconfigured_client_uses_local_fallback(self, store):
        client = FakeChatClient(configured=False)
        service = build_service(store, client)

        reply = asyncio.run(service.send_message("Hello"))

        assert reply.content.endswith(LOCAL_FALLBACK_RESPONSE)
        assert reply.points_awarded == LOCAL_REPLY_POINTS
        assert client.calls == []

    def test_client_error_becomes_assistant_message(self, store):
        client = FakeChatClient(ChatCompletion(error="Chat API error 500"))
        service = build_service(store, client)

        reply = asyncio.run(service.send_message("Hello"))

        assert "I encountered an error connecting to the chat service: Chat API error 500" in reply.content
        assert LOCAL_FALLBACK_RESPONSE in reply.content
        assert reply.points_awarded == LOCAL_REPLY_POINTS

    def test_profile_and_traits_reach_the_prompt(self, store):
        client = FakeChatClient()
        service = build_service(store, client)
        ProfileService(store).save_profile(UserProfile(diet="Vegan", allergies="soy"))
        asyncio.run(service.genetics.analyze_upload(
            b"rsid,chromosome,position,genotype\nrs4988235,2,136608646,AA\n", "dna.csv"
        ))

        reply = asyncio.run(service.send_message("Breakfast ideas?"))

        system_prompt, user_message = client.calls[0]
        assert "Lactose Tolerance: Lactose intolerant" in system_prompt
        assert "I'm allergic to soy" in user_message
        assert "Genetics: 1 traits analyzed" in reply.content

    def test_clear_history(self, store):
        service = build_service(store, FakeChatClient())
        asyncio.run(service.send_message("Hello"))

        service.clear_history()
        assert service.get_history() == []


class TestQuickActions:
    """Test canned prompts."""

    @pytest.fixture
    def service(self, store):
        return build_service(store, FakeChatClient())

    def test_three_day_plan_uses_profile(self, service):
        service.profiles.save_profile(UserProfile(diet="Jain", region="Gujarat", budget=90, allergies="nuts"))
        prompt = service.quick_action_prompt("3-day-plan")
        assert prompt == "Plan 3-day jain meals, Gujarat, ₹90 per meal, 2100 kcal/day, no nuts."

    def test_canned_prompts(self, service):
        assert "anemia" in service.quick_action_prompt("anemia-screen")
        assert "genetics" in service.quick_action_prompt("genetic-diet")

    def test_free_text_passes_through(self, service):
        assert service.quick_action_prompt("Suggest a snack") == "Suggest a snack"

    def test_nutrition_quiz_awards_bonus(self, service, store):
        asyncio.run(service.quick_action("nutrition-quiz"))

        points = GamificationService(store).load().health_points
        assert points == QUIZ_ACTION_POINTS + ENGAGEMENT_POINTS + AI_REPLY_POINTS
        assert service.get_history()[0].content == "I want to take a nutrition quiz to earn health points!"
