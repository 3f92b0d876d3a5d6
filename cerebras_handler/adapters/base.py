"""
cerebras_handler.adapters.base — Handler contract shared with the host.

Every handler exposes its configured model through ``get_model()`` and turns
a system prompt plus conversation history into a stream of ``StreamEvent``
objects through ``create_message()``.  The host consumes all providers
through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass
from typing import Literal, Union

from cerebras_handler.core.models import ChatMessage, HandlerModel


@dataclass(frozen=True)
class TextEvent:
    """Response text."""
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class UsageEvent:
    """Token usage and cost for one call."""
    input_tokens: int
    output_tokens: int
    total_cost: float
    type: Literal["usage"] = "usage"


StreamEvent = Union[TextEvent, UsageEvent]

MessageParam = Union[ChatMessage, dict[str, str]]


class BaseHandler(ABC):
    """
    Interface contract for all provider handlers.

    Subclasses must implement ``get_model()``, ``create_message()`` and
    ``close()``.
    """

    @abstractmethod
    def get_model(self) -> HandlerModel:
        """Return the configured model id and its metadata."""
        ...

    @abstractmethod
    def create_message(
        self,
        system_prompt: str,
        messages: Sequence[MessageParam],
    ) -> AsyncIterator[StreamEvent]:
        """Send the conversation to the provider, yielding response events."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any held resources (HTTP clients, etc.)."""
        ...

    async def __aenter__(self) -> "BaseHandler":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
