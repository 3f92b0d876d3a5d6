"""
cerebras_handler.core.models — Pydantic schemas for handler configuration.

``HandlerOptions`` is the host-supplied configuration a handler is built
from.  It is frozen: a handler reads it, never writes it.  ``ModelInfo``
carries the pricing and context-window facts used for cost estimates.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("cerebras_handler.core.models")

DEFAULT_MODEL = "llama-3.3-70b"
DEFAULT_BASE_URL = "https://api.cerebras.ai"


# ---------------------------------------------------------------------------
# Cross-platform directory helpers
# ---------------------------------------------------------------------------

def get_global_config_dir() -> Path:
    """
    Return the user-level config directory (not created).

    - Windows:  %LOCALAPPDATA%\\cerebras-handler
    - macOS:    ~/Library/Application Support/cerebras-handler
    - Linux:    $XDG_CONFIG_HOME/cerebras-handler  (default ~/.config/cerebras-handler)
    """
    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "cerebras-handler"


class GlobalConfig(BaseModel):
    """
    User-level defaults stored as ``config.json`` in the global config
    directory.  Environment variables always take precedence.
    """
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def load(cls, path: Path | None = None) -> "GlobalConfig":
        """Load from disk, returning defaults if the file is missing or unreadable."""
        path = path or get_global_config_dir() / "config.json"
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                return cls(**data)
            except (OSError, ValueError, TypeError) as exc:
                logger.warning("Ignoring unreadable config file %s: %s", path, exc)
                return cls()
        return cls()


# ---------------------------------------------------------------------------
# Model metadata
# ---------------------------------------------------------------------------

class ModelInfo(BaseModel):
    """Static facts about a model.  Prices are USD per token."""
    model_config = ConfigDict(frozen=True)

    max_tokens: int | None = None
    context_window: int | None = None
    supports_prompt_cache: bool = False
    input_price: float | None = None
    output_price: float | None = None
    name: str | None = None
    description: str | None = None


# Known Cerebras models.  List prices per million tokens converted to
# per-token; adjust as Cerebras changes pricing.
MODEL_CATALOG: dict[str, ModelInfo] = {
    "llama-3.3-70b": ModelInfo(
        name="Llama 3.3 70B",
        description="Llama 3.3 70B served on Cerebras inference",
        max_tokens=8192,
        context_window=65536,
        input_price=0.85 / 1_000_000,
        output_price=1.20 / 1_000_000,
    ),
    "llama3.1-8b": ModelInfo(
        name="Llama 3.1 8B",
        description="Llama 3.1 8B served on Cerebras inference",
        max_tokens=8192,
        context_window=32768,
        input_price=0.10 / 1_000_000,
        output_price=0.10 / 1_000_000,
    ),
    "qwen-3-32b": ModelInfo(
        name="Qwen 3 32B",
        description="Qwen 3 32B served on Cerebras inference",
        max_tokens=16384,
        context_window=65536,
        input_price=0.40 / 1_000_000,
        output_price=0.80 / 1_000_000,
    ),
}


# ---------------------------------------------------------------------------
# Conversation turns
# ---------------------------------------------------------------------------

class ChatMessage(BaseModel):
    """A single conversation turn as the host passes it in."""
    role: Literal["system", "user", "assistant"]
    content: str


# ---------------------------------------------------------------------------
# Handler configuration
# ---------------------------------------------------------------------------

class HandlerOptions(BaseModel):
    """Configuration a handler is constructed from.  Read-only afterwards."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    api_key: str = ""
    model_id: str = DEFAULT_MODEL
    model_info: ModelInfo | None = None
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_env(cls, config_path: Path | None = None, **overrides: Any) -> "HandlerOptions":
        """
        Build options from the environment.

        Resolution order (highest priority first):
          1. Explicit ``overrides`` keyword arguments
          2. Environment variables (CEREBRAS_API_KEY, CEREBRAS_MODEL, CEREBRAS_BASE_URL)
          3. Global config (~/.config/cerebras-handler/config.json)
          4. Built-in defaults

        When no ``model_info`` override is given, it is looked up in
        :data:`MODEL_CATALOG`; unknown models are left without info.
        """
        gc = GlobalConfig.load(config_path)

        model_id = overrides.pop("model_id", None) or os.getenv("CEREBRAS_MODEL", gc.model)
        model_info = overrides.pop("model_info", None)
        if model_info is None:
            model_info = MODEL_CATALOG.get(model_id)
            if model_info is None:
                logger.debug("No catalog entry for model '%s'", model_id)

        return cls(
            api_key=overrides.pop("api_key", None) or os.getenv("CEREBRAS_API_KEY", gc.api_key),
            model_id=model_id,
            model_info=model_info,
            base_url=overrides.pop("base_url", None) or os.getenv("CEREBRAS_BASE_URL", gc.base_url),
            **overrides,
        )


class HandlerModel(BaseModel):
    """The ``(id, info)`` pair a handler reports for its configured model."""
    model_config = ConfigDict(frozen=True)

    id: str
    info: ModelInfo
