"""
inference_engine/services/llm_client.py
=======================================
Thin wrapper around the hosted chat-completion API.

Every call carries an explicit timeout and is attempted exactly once;
the SDK's automatic retries are disabled.  Any failure surfaces as a
single :class:`ModelResponseError`.
"""

from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from .conf import get_setting
from .exceptions import ModelResponseError
from .usage_guard import TokenBudget

logger: logging.Logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """Chat-completion client configured from ``settings.SYMPTOMDX``.

    Args:
        api_key: API key; defaults to ``OPENAI_API_KEY``.
        model: Model identifier; defaults to ``OPENAI_MODEL``.
        timeout: Per-request timeout in seconds.
        temperature: Sampling temperature.
        max_tokens: Output-token ceiling.
        budget: Daily token budget shared by every client.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        budget: Optional[TokenBudget] = None,
    ) -> None:
        self.api_key: str = api_key if api_key is not None else get_setting("OPENAI_API_KEY")
        self.model: str = model or get_setting("OPENAI_MODEL")
        self.timeout: float = timeout if timeout is not None else get_setting("OPENAI_TIMEOUT_SECONDS")
        self.temperature: float = (
            temperature if temperature is not None else get_setting("OPENAI_TEMPERATURE")
        )
        self.max_tokens: int = max_tokens or get_setting("OPENAI_MAX_TOKENS")
        self.budget: TokenBudget = budget or TokenBudget()
        self._client: Optional[OpenAI] = None

    def _get_client(self) -> OpenAI:
        if not self.api_key:
            raise ModelResponseError(
                message="OPENAI_API_KEY is not configured.",
                details={"model": self.model},
            )
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def complete(
        self,
        messages: list[dict[str, str]],
        max_tokens: Optional[int] = None,
    ) -> str:
        """Send one chat completion and return the reply text.

        Args:
            messages: Chat messages (``role`` / ``content`` dicts).
            max_tokens: Override of the configured output ceiling.

        Returns:
            The content of the first choice.

        Raises:
            ModelResponseError: On network errors, non-success statuses,
                timeouts, an empty reply or an exhausted token budget.
        """
        client: OpenAI = self._get_client()
        ceiling: int = max_tokens or self.max_tokens
        self.budget.check(ceiling)
        try:
            completion = client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=ceiling,
            )
        except OpenAIError as exc:
            logger.warning("chat completion failed: %s", exc)
            raise ModelResponseError(
                message="The language model request failed.",
                details={"model": self.model, "original_error": str(exc)},
            ) from exc

        usage = getattr(completion, "usage", None)
        if usage is not None:
            self.budget.record(usage.total_tokens or 0)

        content: Optional[str] = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise ModelResponseError(
                message="The language model returned an empty reply.",
                details={"model": self.model},
            )
        return content

    def test_connection(self) -> dict:
        """Check the API with a tiny completion.

        Returns:
            ``{"success": bool, "message": str}``; never raises.
        """
        try:
            self.complete(
                [{"role": "user", "content": "Hello, are you working?"}],
                max_tokens=10,
            )
        except ModelResponseError as exc:
            reason: str = exc.details.get("original_error", exc.message)
            return {"success": False, "message": f"connection failed: {reason}"}
        return {"success": True, "message": "connection successful"}
