"""
cerebras_handler.core.usage — Token estimates and cost accounting.

Cerebras responses are consumed without their ``usage`` block, so token
counts are a length heuristic (four characters per token).  The estimate
must stay stable for a given input length; cost figures are derived from it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cerebras_handler.core.models import ModelInfo

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Rough token count: ``ceil(len(text) / 4)``."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def calculate_cost(info: ModelInfo | None, input_tokens: int, output_tokens: int) -> float:
    """Cost in USD.  Missing model info or a missing price counts as 0."""
    input_price = (info.input_price if info else None) or 0
    output_price = (info.output_price if info else None) or 0
    return input_tokens * input_price + output_tokens * output_price


@dataclass
class CostTracker:
    """
    Tracks cumulative token usage and cost across handler calls.
    """
    model: str = ""
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_cost_usd: float = 0.0
    turn_costs: list[float] = field(default_factory=list)

    def add_usage(self, input_tokens: int, output_tokens: int, total_cost: float) -> float:
        """Record one call's usage and return its cost."""
        self.total_input_tokens += input_tokens
        self.total_output_tokens += output_tokens
        self.total_cost_usd += total_cost
        self.turn_costs.append(total_cost)
        return total_cost

    def format_cost(self, turn_cost: float | None = None) -> str:
        """Format cost display string."""
        if turn_cost is not None and turn_cost > 0:
            return f"Turn: ${turn_cost:.6f} | Session: ${self.total_cost_usd:.6f}"
        if self.total_cost_usd > 0:
            return f"Session cost: ${self.total_cost_usd:.6f}"
        return "Session cost: $0.00 (no pricing)"

    def format_summary(self) -> str:
        """Format a full session cost summary."""
        lines = [
            "Session Cost Summary",
            f"  Model:          {self.model}",
            f"  Input tokens:   {self.total_input_tokens:,} (estimated)",
            f"  Output tokens:  {self.total_output_tokens:,} (estimated)",
            f"  Calls:          {len(self.turn_costs)}",
            f"  Total cost:     ${self.total_cost_usd:.6f}",
        ]
        return "\n".join(lines)
