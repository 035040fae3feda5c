"""Thin wrapper around the OpenAI chat completions API.

Every call asks for a JSON object response and is bounded by a client-side
timeout. No retries are attempted. Anything that goes wrong (missing API
key, transport error, timeout, empty content) is raised as
`GenerationError` so callers have a single failure to absorb.
"""

from typing import Optional

import openai
from openai import OpenAI

from core.config import settings
from core.exceptions import GenerationError
from core.logger import get_logger

logger = get_logger("services.llm_client")


class LLMClient:
    """JSON-mode text generator backed by OpenAI."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds
        self.temperature = temperature if temperature is not None else settings.llm_temperature
        self.max_tokens = max_tokens or settings.llm_max_tokens
        self._client = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("OPENAI_API_KEY is not configured")
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    def complete_json(self, prompt: str, temperature: Optional[float] = None, role: str = "system") -> str:
        """Send `prompt` and return the raw text content of the reply.

        Raises:
            GenerationError: On any failure to obtain non-empty content.
        """
        client = self._get_client()
        logger.info("Calling model %s (timeout=%ss)", self.model, self.timeout)
        try:
            completion = client.chat.completions.create(
                model=self.model,
                messages=[{"role": role, "content": prompt}],
                temperature=self.temperature if temperature is None else temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
        except openai.APITimeoutError as exc:
            raise GenerationError("Text generation timed out", cause=exc) from exc
        except openai.OpenAIError as exc:
            raise GenerationError(f"Text generation failed: {exc}", cause=exc) from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise GenerationError("Empty response from text generation service")
        return content
