import logging
from typing import Any

from openai import APIStatusError, AsyncOpenAI, OpenAIError
from pydantic import BaseModel

from app.core.config import settings
from app.core.errors import UpstreamError

logger = logging.getLogger(__name__)

FALLBACK_SPELL_TEXT = "The spirits whisper, but words fail to form."


class SamplingParameters(BaseModel):
    temperature: float = 0.85
    presence_penalty: float = 0.3
    frequency_penalty: float = 0.2


def _upstream_message(exc: Exception) -> str | None:
    """Best-effort extraction of the provider's own error message."""
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return str(nested["message"])
        if body.get("message"):
            return str(body["message"])
    message = getattr(exc, "message", None) or str(exc)
    return message or None


def _first_choice_text(response: Any) -> str:
    choices = response.choices
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return ""
    return content.strip()


class LLMClient:
    """Thin wrapper over an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ):
        self.model_name = model_name or settings.OPENAI_MODEL
        self.client = AsyncOpenAI(
            base_url=base_url or settings.LLM_BASE_URL,
            api_key=api_key or settings.OPENAI_API_KEY or "",
            max_retries=0,
        )

    async def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int,
        sampling: SamplingParameters | None = None,
    ) -> str:
        """
        Issue a single chat completion and return the first choice's text.
        Empty output is replaced by FALLBACK_SPELL_TEXT; provider failures raise UpstreamError.
        """
        sampling = sampling or SamplingParameters()
        logger.info("Issuing text request to model %s (max_tokens=%s)...", self.model_name, max_tokens)
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                **sampling.model_dump(),
            )
        except APIStatusError as e:
            message = _upstream_message(e)
            logger.error(
                "Completion request to %s failed with status %s: %s",
                self.model_name,
                e.status_code,
                message,
            )
            raise UpstreamError(message, upstream_status=e.status_code) from e
        except OpenAIError as e:
            message = _upstream_message(e)
            logger.error("Completion request to %s failed: %s", self.model_name, message)
            raise UpstreamError(message) from e

        if getattr(response, "choices", None) is None:
            logger.error("Received invalid response structure from %s: %s", self.model_name, response)
            raise UpstreamError(f"Provider {self.model_name} returned an invalid response.")

        text = _first_choice_text(response)
        if not text:
            logger.warning("Model %s returned no usable text; using fallback.", self.model_name)
            return FALLBACK_SPELL_TEXT
        return text
