"""
cerebras_handler.adapters.cerebras — Cerebras chat-completion handler.

Cerebras speaks the OpenAI Chat Completions wire format but does not stream,
so each ``create_message()`` call makes one blocking request and replays the
result as a text event followed by a usage event.  Usage is estimated from
character counts, not read from the response.

Default model: ``llama-3.3-70b``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any

import httpx

from cerebras_handler.adapters.base import (
    BaseHandler,
    MessageParam,
    StreamEvent,
    TextEvent,
    UsageEvent,
)
from cerebras_handler.core.errors import ConfigurationError, ProviderError
from cerebras_handler.core.models import ChatMessage, HandlerModel, HandlerOptions
from cerebras_handler.core.usage import calculate_cost, estimate_tokens

logger = logging.getLogger("cerebras_handler.adapters.cerebras")

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"
PROVIDER_NAME = "Cerebras"


class CerebrasHandler(BaseHandler):
    """
    Sends conversations to the Cerebras Chat Completions API.

    Sampling is pinned to ``temperature=0`` and ``stream=false``.  The
    handler holds no per-call state, so one instance can serve concurrent
    ``create_message()`` calls.  Pass ``client`` to share (or fake) the
    HTTP client; an injected client is left open by ``close()``.
    """

    def __init__(
        self,
        options: HandlerOptions,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = options.api_key
        self._model_id = options.model_id
        self._model_info = options.model_info
        self._url = options.base_url.rstrip("/") + CHAT_COMPLETIONS_PATH
        self._headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=120.0)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get_model(self) -> HandlerModel:
        if not self._model_id or self._model_info is None:
            raise ConfigurationError("Model information not provided")
        return HandlerModel(id=self._model_id, info=self._model_info)

    async def create_message(
        self,
        system_prompt: str,
        messages: Sequence[MessageParam],
    ) -> AsyncIterator[StreamEvent]:
        """
        Yield exactly one ``TextEvent`` then one ``UsageEvent``.

        Nothing is sent until the iterator is first advanced.  HTTP and
        transport failures raise ``ProviderError``; a malformed response body
        raises whatever the lookup raised.  Either way no event is yielded.
        """
        all_messages = [{"role": "system", "content": system_prompt}]
        all_messages.extend(self._convert_message(m) for m in messages)

        body: dict[str, Any] = {
            "model": self._model_id,
            "messages": all_messages,
            "temperature": 0,
            "stream": False,
        }

        logger.debug(
            "Cerebras request: model=%s messages=%d",
            self._model_id,
            len(all_messages),
        )

        try:
            resp = await self._client.post(self._url, json=body, headers=self._headers)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            status = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            detail = self._error_detail(exc)
            logger.warning("Cerebras request failed (status=%s): %s", status, detail)
            raise ProviderError(PROVIDER_NAME, detail, status) from exc

        content = resp.json()["choices"][0]["message"]["content"]

        input_text = " ".join(m["content"] for m in all_messages)
        input_tokens = estimate_tokens(input_text)
        output_tokens = estimate_tokens(content)
        total_cost = calculate_cost(self._model_info, input_tokens, output_tokens)

        logger.debug(
            "Cerebras usage (estimated): in=%d out=%d cost=%.6f",
            input_tokens,
            output_tokens,
            total_cost,
        )

        yield TextEvent(text=content)
        yield UsageEvent(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_cost=total_cost,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _convert_message(msg: MessageParam) -> dict[str, str]:
        """Copy a conversation turn into a plain dict for the API."""
        if isinstance(msg, ChatMessage):
            return {"role": msg.role, "content": msg.content}
        return {"role": msg["role"], "content": msg["content"]}

    @staticmethod
    def _error_detail(exc: httpx.HTTPError) -> str:
        """Prefer the provider's ``error.message``; fall back to the exception text."""
        if isinstance(exc, httpx.HTTPStatusError):
            try:
                data = exc.response.json()
            except ValueError:
                data = None
            error = data.get("error") if isinstance(data, dict) else None
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return str(exc) or type(exc).__name__
