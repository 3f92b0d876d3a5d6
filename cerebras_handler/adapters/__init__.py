"""
cerebras_handler.adapters — Provider handlers.

    - ``BaseHandler``      — the contract the host consumes
    - ``CerebrasHandler``  — Cerebras Chat Completions (non-streaming)
"""

from __future__ import annotations

from cerebras_handler.adapters.base import (
    BaseHandler,
    MessageParam,
    StreamEvent,
    TextEvent,
    UsageEvent,
)
from cerebras_handler.adapters.cerebras import CerebrasHandler

__all__ = [
    "BaseHandler",
    "CerebrasHandler",
    "MessageParam",
    "StreamEvent",
    "TextEvent",
    "UsageEvent",
]
