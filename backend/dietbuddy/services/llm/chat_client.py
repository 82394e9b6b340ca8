import logging
from typing import Optional, Protocol

import backoff
import httpx
from pydantic import BaseModel

from dietbuddy.core.config import ChatClientConfig, get_config

logger = logging.getLogger(__name__)


class ChatCompletion(BaseModel):
    """Either the assistant text or a human-readable error."""
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.text is not None


class ChatCompletionClient(Protocol):
    """Narrow interface the chat service depends on."""

    @property
    def is_configured(self) -> bool: ...

    async def send_chat_completion(self, system_prompt: str, user_message: str) -> ChatCompletion: ...


class EmptyCompletionError(RuntimeError):
    pass


_shared_client: Optional[httpx.AsyncClient] = None


def _get_shared_client(timeout: float) -> httpx.AsyncClient:
    # Created lazily so it binds to the running event loop.
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(timeout=timeout)
    return _shared_client


def _giveup(e: Exception) -> bool:
    return isinstance(e, httpx.HTTPStatusError) and e.response.status_code < 500


class OpenAIChatClient:
    """
    Client for an OpenAI-compatible /chat/completions endpoint.
    The credential comes from configuration, never from request data.
    """

    def __init__(
        self,
        config: Optional[ChatClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or get_config().chat
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or _get_shared_client(self.config.timeout_seconds)

    async def send_chat_completion(self, system_prompt: str, user_message: str) -> ChatCompletion:
        """
        Sends one chat turn. Transport and API failures are converted into
        ``ChatCompletion(error=...)``; this method does not raise for them.
        """
        if not self.is_configured:
            return ChatCompletion(error="Chat API key is not configured")

        logger.info("Sending chat request", extra={"model": self.config.model})
        try:
            text = await self._post_with_retry(system_prompt, user_message)
        except httpx.HTTPStatusError as e:
            logger.error(f"Chat API returned {e.response.status_code}: {str(e)}")
            return ChatCompletion(error=f"Chat API error {e.response.status_code}")
        except httpx.RequestError as e:
            logger.error(f"Error communicating with chat API: {str(e)}")
            return ChatCompletion(error=f"Could not reach chat API: {e.__class__.__name__}")
        except (EmptyCompletionError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Malformed chat API response: {str(e)}")
            return ChatCompletion(error="No response content received from chat API")

        logger.info("Chat request successful", extra={"response_length": len(text)})
        return ChatCompletion(text=text)

    async def _post_with_retry(self, system_prompt: str, user_message: str) -> str:
        @backoff.on_exception(
            backoff.expo,
            (httpx.RequestError, httpx.HTTPStatusError),
            max_tries=self.config.max_tries,
            giveup=_giveup,
            logger=logger,
        )
        async def _post() -> str:
            return await self._post(system_prompt, user_message)

        return await _post()

    async def _post(self, system_prompt: str, user_message: str) -> str:
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

        response = await self.http_client.post(self.config.api_url, json=payload, headers=headers)
        response.raise_for_status()

        data = response.json()
        content = data["choices"][0]["message"]["content"]
        if not content:
            raise EmptyCompletionError("empty completion")
        return content
