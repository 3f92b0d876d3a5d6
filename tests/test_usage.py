"""Tests for the token heuristic, cost formula and CostTracker."""

from __future__ import annotations

import pytest

from cerebras_handler.core.models import ModelInfo
from cerebras_handler.core.usage import CostTracker, calculate_cost, estimate_tokens


@pytest.mark.parametrize(
    ("text", "tokens"),
    [("", 0), ("a", 1), ("abcd", 1), ("abcde", 2), ("test response", 4)],
)
def test_estimate_tokens_rounds_up(text, tokens):
    assert estimate_tokens(text) == tokens


def test_calculate_cost_uses_both_prices():
    info = ModelInfo(input_price=0.0001, output_price=0.0002)
    assert calculate_cost(info, 5, 3) == pytest.approx(0.0011)


def test_calculate_cost_treats_missing_prices_as_zero():
    assert calculate_cost(ModelInfo(output_price=0.5), 10, 2) == pytest.approx(1.0)
    assert calculate_cost(ModelInfo(), 10, 2) == 0
    assert calculate_cost(None, 10, 2) == 0


def test_cost_tracker_accumulates_calls():
    tracker = CostTracker(model="llama-3.3-70b")
    tracker.add_usage(8, 4, 0.0016)
    tracker.add_usage(2, 1, 0.0004)

    assert tracker.total_input_tokens == 10
    assert tracker.total_output_tokens == 5
    assert tracker.total_cost_usd == pytest.approx(0.002)
    assert tracker.turn_costs == [0.0016, 0.0004]
    assert tracker.format_cost(0.0004) == "Turn: $0.000400 | Session: $0.002000"
    summary = tracker.format_summary()
    assert "llama-3.3-70b" in summary
    assert "Calls:          2" in summary


def test_cost_tracker_without_pricing():
    assert CostTracker().format_cost() == "Session cost: $0.00 (no pricing)"
