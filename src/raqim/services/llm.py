"""DeepSeek chat-completion client.

DeepSeek exposes an OpenAI-compatible API, so the official ``openai`` SDK is
used with a custom ``base_url``. The SDK's own retry loop is disabled; retries
happen here so every attempt is logged with the same backoff policy.
"""

import asyncio
import logging
from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from raqim.config import Settings
from raqim.exceptions import LLMError

logger = logging.getLogger(__name__)

EMPTY_REPLY_FALLBACK = "عذراً، لم أتمكن من توليد رد."

_RETRYABLE_ERRORS = (
    openai.APIConnectionError,  # includes APITimeoutError
    openai.RateLimitError,
    openai.InternalServerError,
)


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatResponse:
    content: str
    model: str


class LLMClient:
    """Async client for an OpenAI-compatible /chat/completions endpoint."""

    def __init__(self, settings: Settings) -> None:
        self._configured = settings.llm_enabled
        self._model = settings.llm_model_name
        self._temperature = settings.llm_temperature
        self._max_tokens = settings.llm_max_tokens
        self._max_retries = settings.llm_max_retries
        self._retry_delay = settings.llm_retry_delay
        self._client = AsyncOpenAI(
            # The SDK refuses to build without a key; requests are never sent unconfigured
            api_key=settings.llm_api_key or "unset",
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout,
            max_retries=0,
        )

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def chat(
        self,
        messages: list[ChatMessage],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatResponse:
        """Send a chat completion request, retrying transient failures.

        Connection errors, timeouts, rate limits and 5xx responses are retried
        with exponential backoff. Any other API error, or running out of
        retries, raises LLMError.
        """
        if not self._configured:
            raise LLMError("LLM API key is not configured")

        max_attempts = 1 + self._max_retries
        payload = [m.as_dict() for m in messages]

        for attempt in range(1, max_attempts + 1):
            try:
                completion = await self._client.chat.completions.create(
                    model=self._model,
                    messages=payload,
                    temperature=temperature if temperature is not None else self._temperature,
                    max_tokens=max_tokens if max_tokens is not None else self._max_tokens,
                )
            except _RETRYABLE_ERRORS as e:
                if attempt >= max_attempts:
                    logger.error("All %d LLM attempts failed: %s", max_attempts, e)
                    raise LLMError("فشل في الاتصال بـ DeepSeek API") from e
                delay = self._retry_delay * (2 ** (attempt - 1))
                logger.warning(
                    "LLM attempt %d/%d failed, retry in %.1fs: %s",
                    attempt,
                    max_attempts,
                    delay,
                    e,
                )
                await asyncio.sleep(delay)
                continue
            except openai.APIError as e:
                logger.error("LLM request rejected: %s", e)
                raise LLMError("فشل في الاتصال بـ DeepSeek API") from e

            content = ""
            if completion.choices:
                content = completion.choices[0].message.content or ""
            if not content.strip():
                logger.warning("LLM returned an empty reply, using fallback text")
                content = EMPTY_REPLY_FALLBACK
            logger.debug("LLM response (first 200 chars): %s", content[:200])
            return ChatResponse(content=content, model=completion.model or self._model)

        raise LLMError("LLM retry loop exited without a response")

    async def close(self) -> None:
        await self._client.close()
