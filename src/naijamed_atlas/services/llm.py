"""Completion providers and LLM response helpers.

Two interchangeable providers implement CompletionProvider:
  - GroqProvider:      Groq chat completions API
  - AnthropicProvider: Anthropic messages API

SDK clients are created on first use, so a provider can be constructed
without credentials. Every SDK or response-shape failure surfaces as
CompletionError.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any

import anthropic
import groq
from anthropic import NOT_GIVEN, AsyncAnthropic
from dotenv import load_dotenv
from groq import AsyncGroq

from naijamed_atlas.config import Settings, get_settings

load_dotenv()

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\n?|\n?```")


class CompletionError(Exception):
    """Raised when a completion request fails or returns an unusable response."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"[{provider}] {message}")


def parse_llm_json_object(response: str) -> dict[str, Any]:
    """Decode the first JSON object in a completion, ignoring markdown fences.

    Raises ValueError when no object can be decoded.
    """
    cleaned = _CODE_FENCE.sub("", response).strip()
    match = re.search(r"\{.*\}", cleaned, re.DOTALL)
    if not match:
        raise ValueError(f"No JSON object in response: {cleaned[:200]!r}")
    return json.loads(match.group())


class CompletionProvider(ABC):
    """One hosted text-completion backend."""

    name: str

    def __init__(self, model: str) -> None:
        self.model = model

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system: str = "",
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Send one system/user prompt pair and return the raw completion text."""
        ...


class GroqProvider(CompletionProvider):
    name = "groq"

    def __init__(self, api_key: str, model: str) -> None:
        super().__init__(model)
        self._api_key = api_key
        self._client: AsyncGroq | None = None

    def _get_client(self) -> AsyncGroq:
        if self._client is None:
            self._client = AsyncGroq(api_key=self._api_key or None)
        return self._client

    async def complete(
        self,
        prompt: str,
        system: str = "",
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            completion = await self._get_client().chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            return completion.choices[0].message.content or ""
        except groq.GroqError as e:
            raise CompletionError(self.name, str(e)) from e
        except (IndexError, AttributeError) as e:
            raise CompletionError(self.name, f"Malformed response: {e}") from e


class AnthropicProvider(CompletionProvider):
    name = "anthropic"

    def __init__(self, api_key: str, model: str) -> None:
        super().__init__(model)
        self._api_key = api_key
        self._client: AsyncAnthropic | None = None

    def _get_client(self) -> AsyncAnthropic:
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._api_key or None)
        return self._client

    async def complete(
        self,
        prompt: str,
        system: str = "",
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        try:
            response = await self._get_client().messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system or NOT_GIVEN,
                messages=[{"role": "user", "content": prompt}],
            )
            return response.content[0].text
        except anthropic.AnthropicError as e:
            raise CompletionError(self.name, str(e)) from e
        except (IndexError, AttributeError) as e:
            raise CompletionError(self.name, f"Malformed response: {e}") from e


def get_provider(settings: Settings | None = None) -> CompletionProvider:
    """Build the provider selected by ``ai_provider``."""
    settings = settings or get_settings()
    if settings.ai_provider == "anthropic":
        provider: CompletionProvider = AnthropicProvider(
            settings.anthropic_api_key, settings.model_name
        )
    else:
        provider = GroqProvider(settings.groq_api_key, settings.model_name)
    logger.info("Using %s provider with model %s", provider.name, provider.model)
    return provider
