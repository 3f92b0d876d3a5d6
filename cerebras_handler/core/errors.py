"""cerebras_handler error hierarchy."""

from __future__ import annotations


class HandlerError(Exception):
    """Base for all cerebras_handler errors."""


class ConfigurationError(HandlerError):
    """Raised when required model configuration is missing."""


class ProviderError(HandlerError):
    """
    Raised when the provider call fails at the HTTP level.

    ``status`` is the HTTP status code, or ``None`` when no response was
    received (connection refused, timeout, ...).
    """

    def __init__(self, provider: str, detail: str, status: int | None = None) -> None:
        self.provider = provider
        self.detail = detail
        self.status = status
        super().__init__(f"{provider} API error: {detail}")
