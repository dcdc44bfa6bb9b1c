import asyncio
import logging
from typing import Any, Dict, Optional

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel

from travel_advisor.config import Settings
from travel_advisor.graph.prompts import SYSTEM_PROMPT
from travel_advisor.integrations.exceptions import IntegrationError, TransportError

logger = logging.getLogger(__name__)

_TRUNCATED = {"length", "content_filter"}


class RawServiceOutput(BaseModel):
    """What came back from the completion service, before interpretation."""

    content: Optional[str] = None
    finish_reason: Optional[str] = None
    refusal: Optional[str] = None
    model: Optional[str] = None

    @property
    def incomplete(self) -> bool:
        return self.finish_reason in _TRUNCATED

    @property
    def has_text(self) -> bool:
        return bool(self.content and self.content.strip())


class ResearchClient:
    """
    Single-shot call to the chat completions endpoint.

    The underlying ``AsyncOpenAI`` client is injected, so callers decide
    where credentials come from. No retries: one request per submission,
    bounded by ``timeout`` seconds.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str = "o3-mini",
        reasoning_effort: Optional[str] = "medium",
        max_output_tokens: int = 4000,
        timeout: float = 60.0,
        structured_output: bool = True,
    ):
        self._client = client
        self.model = model
        self.reasoning_effort = reasoning_effort
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self.structured_output = structured_output

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResearchClient":
        if not settings.openai_api_key:
            raise IntegrationError("OPENAI_API_KEY not set. Please add it to your .env file.")
        client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url or None,
            timeout=settings.request_timeout,
            max_retries=0,
        )
        return cls(
            client,
            model=settings.model,
            reasoning_effort=settings.reasoning_effort,
            max_output_tokens=settings.max_output_tokens,
            timeout=settings.request_timeout,
            structured_output=settings.structured_output,
        )

    def _request_kwargs(self, prompt: str, schema: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_completion_tokens": self.max_output_tokens,
        }
        if self.reasoning_effort:
            kwargs["reasoning_effort"] = self.reasoning_effort

        # Add response_format if specified
        if schema is not None and self.structured_output:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "travel_plan", "schema": schema, "strict": True},
            }
        return kwargs

    async def call(self, prompt: str, schema: Optional[Dict[str, Any]] = None) -> RawServiceOutput:
        kwargs = self._request_kwargs(prompt, schema)
        logger.info("Requesting travel research from %s (structured=%s)", self.model, "response_format" in kwargs)

        try:
            resp = await asyncio.wait_for(self._client.chat.completions.create(**kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("Completion request timed out after %.1fs", self.timeout)
            raise TransportError(f"Completion request timed out after {self.timeout:.1f}s") from e
        except openai.APIError as e:
            logger.error(f"Completion request failed: {e}")
            raise TransportError(f"Completion request failed: {e}") from e

        usage = getattr(resp, "usage", None)
        if usage is not None:
            logger.info("Completion used %s prompt / %s completion tokens", usage.prompt_tokens, usage.completion_tokens)

        if not resp.choices:
            logger.warning("Completion returned no choices")
            return RawServiceOutput(model=getattr(resp, "model", None))

        choice = resp.choices[0]
        message = choice.message
        return RawServiceOutput(
            content=message.content,
            finish_reason=choice.finish_reason,
            refusal=getattr(message, "refusal", None),
            model=getattr(resp, "model", None),
        )
