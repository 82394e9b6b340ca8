"""
Chat Service - runs one conversation turn from profile to prompt to reply.

Owns the persisted chat history and awards engagement points. Failures of
the outbound call become assistant messages; a turn never raises for them.
"""
import logging
import time
from typing import List, Tuple

from dietbuddy.services.gamification.engine import GamificationService
from dietbuddy.services.genetics.analysis import GeneticAnalysisService
from dietbuddy.services.llm.chat_client import ChatCompletionClient
from dietbuddy.services.llm.prompt_builder import (
    build_profile_summary,
    build_system_prompt,
    build_user_message,
)
from dietbuddy.services.profile.profile_service import ProfileService
from dietbuddy.storage import CHAT_HISTORY_KEY, LocalStore

from .models import ChatMessage

logger = logging.getLogger(__name__)

ENGAGEMENT_POINTS = 5
AI_REPLY_POINTS = 20
LOCAL_REPLY_POINTS = 10
QUIZ_ACTION_POINTS = 20

LOCAL_FALLBACK_RESPONSE = (
    "I'm your AI nutrition assistant, but the chat service is not configured, so I can't "
    "give detailed responses yet. Ask your administrator to set a chat API key to get "
    "comprehensive nutrition advice tailored to your profile.\n\n"
    "For now, try exploring the interactive features like the Quiz, Traceability, or "
    "Flavor Design Lab!"
)


class ChatService:
    def __init__(
        self,
        store: LocalStore,
        client: ChatCompletionClient,
        profiles: ProfileService,
        genetics: GeneticAnalysisService,
        gamification: GamificationService,
    ):
        self.store = store
        self.client = client
        self.profiles = profiles
        self.genetics = genetics
        self.gamification = gamification

    # History

    def get_history(self) -> List[ChatMessage]:
        raw = self.store.get(CHAT_HISTORY_KEY, [])
        try:
            return [ChatMessage.model_validate(m) for m in raw]
        except (ValueError, TypeError) as e:
            logger.error("Error loading chat history: %s", e)
            return []

    def _append(self, *messages: ChatMessage) -> None:
        history = self.get_history()
        history.extend(messages)
        self.store.set(CHAT_HISTORY_KEY, [m.model_dump() for m in history])

    def clear_history(self) -> None:
        self.store.remove(CHAT_HISTORY_KEY)

    # Conversation turns

    async def send_message(self, content: str) -> ChatMessage:
        user_message = ChatMessage(role="user", content=content)
        self._append(user_message)
        self.gamification.record_message()
        self.gamification.add_points(ENGAGEMENT_POINTS)

        profile = self.profiles.get_profile()
        result = self.genetics.get_result()
        traits = result.traits if result else []

        start_time = time.time()
        reply_text, points = await self._generate_reply(content, profile, traits)
        logger.info("Chat turn generated in %.2fs", time.time() - start_time)

        assistant_message = ChatMessage(
            role="assistant",
            content=build_profile_summary(profile, len(traits)) + reply_text,
            points_awarded=points,
        )
        self._append(assistant_message)
        if points:
            self.gamification.add_points(points)
        return assistant_message

    async def _generate_reply(self, content, profile, traits) -> Tuple[str, int]:
        if not self.client.is_configured:
            return LOCAL_FALLBACK_RESPONSE, LOCAL_REPLY_POINTS

        completion = await self.client.send_chat_completion(
            build_system_prompt(profile, traits),
            build_user_message(content, profile, len(traits)),
        )
        if completion.ok:
            return completion.text, AI_REPLY_POINTS

        logger.warning("Chat completion failed: %s", completion.error)
        return (
            f"I encountered an error connecting to the chat service: {completion.error}. "
            f"Please try again.\n\n{LOCAL_FALLBACK_RESPONSE}",
            LOCAL_REPLY_POINTS,
        )

    async def quick_action(self, action: str) -> ChatMessage:
        prompt = self.quick_action_prompt(action)
        if action == "nutrition-quiz":
            self.gamification.add_points(QUIZ_ACTION_POINTS)
        return await self.send_message(prompt)

    def quick_action_prompt(self, action: str) -> str:
        if action == "3-day-plan":
            profile = self.profiles.get_profile()
            prompt = (
                f"Plan 3-day {profile.diet.lower()} meals, {profile.region}, "
                f"₹{profile.budget:g} per meal, 2100 kcal/day"
            )
            if profile.allergies:
                prompt += f", no {profile.allergies}"
            if profile.goals:
                prompt += f", focusing on {profile.goals}"
            return prompt + "."
        if action == "anemia-screen":
            return "Do a quick anemia self-screen and suggest tests/diet using local foods."
        if action == "nutrition-quiz":
            return "I want to take a nutrition quiz to earn health points!"
        if action == "genetic-diet":
            return "What diet should I follow based on my genetics?"
        return action

