from .chat_client import ChatCompletion, ChatCompletionClient, OpenAIChatClient
from .prompt_builder import (
    DIETARY_RESTRICTIONS,
    build_genetic_guidance,
    build_profile_summary,
    build_system_prompt,
    build_user_message,
)

__all__ = [
    "ChatCompletion",
    "ChatCompletionClient",
    "OpenAIChatClient",
    "DIETARY_RESTRICTIONS",
    "build_genetic_guidance",
    "build_profile_summary",
    "build_system_prompt",
    "build_user_message",
]
