"""
cerebras-handler — Cerebras chat completions behind a uniform event stream.

Turns a system prompt plus conversation history into one Cerebras request and
replays the answer as a text event followed by an estimated usage event.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import tomllib

from cerebras_handler.adapters import CerebrasHandler, TextEvent, UsageEvent
from cerebras_handler.core.errors import ConfigurationError, HandlerError, ProviderError
from cerebras_handler.core.models import ChatMessage, HandlerOptions, ModelInfo


def _resolve_version() -> str:
    """Resolve the package version.

    Priority:
    1) Local source checkout version from pyproject.toml (if present)
    2) Installed package metadata (cerebras-handler)
    3) Safe fallback
    """
    root = Path(__file__).resolve().parent.parent
    pyproject = root / "pyproject.toml"
    try:
        if pyproject.exists():
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
            ver = data.get("project", {}).get("version")
            if isinstance(ver, str) and ver.strip():
                return ver.strip()
    except (OSError, tomllib.TOMLDecodeError):
        pass

    try:
        return version("cerebras-handler")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _resolve_version()

__all__ = [
    "CerebrasHandler",
    "ChatMessage",
    "ConfigurationError",
    "HandlerError",
    "HandlerOptions",
    "ModelInfo",
    "ProviderError",
    "TextEvent",
    "UsageEvent",
    "__version__",
]
