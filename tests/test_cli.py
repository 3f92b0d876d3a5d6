"""Tests for the cerebras-handler command-line interface."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cerebras_handler import cli
from cerebras_handler.adapters.cerebras import CerebrasHandler


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_handler(monkeypatch, fake):
    monkeypatch.setattr(cli, "CerebrasHandler", lambda opts: CerebrasHandler(opts, client=fake.client()))
    return fake


def test_ask_prints_text_and_usage(runner, fake_handler, monkeypatch):
    monkeypatch.setenv("CEREBRAS_API_KEY", "test-key")
    result = runner.invoke(cli.main, ["ask", "test message", "--system", "test system prompt"])

    assert result.exit_code == 0, result.output
    assert "test response" in result.output
    assert "in=8 out=4" in result.output
    body = fake_handler.last_body
    assert body["messages"][0] == {"role": "system", "content": "test system prompt"}
    assert body["messages"][1] == {"role": "user", "content": "test message"}


def test_ask_summary(runner, fake_handler):
    result = runner.invoke(cli.main, ["ask", "hello", "--summary"])
    assert result.exit_code == 0, result.output
    assert "Session Cost Summary" in result.output


def test_ask_reports_provider_error(runner, fake_handler):
    import httpx

    fake_handler.responder = lambda request: httpx.Response(401, json={"error": {"message": "Wrong API Key"}})
    result = runner.invoke(cli.main, ["ask", "hello"])
    assert result.exit_code == 1
    assert "Wrong API Key" in result.output


def test_model_shows_catalog_entry(runner):
    result = runner.invoke(cli.main, ["model"])
    assert result.exit_code == 0, result.output
    assert "llama-3.3-70b" in result.output
    assert "0.85" in result.output


def test_model_unknown_is_configuration_error(runner):
    result = runner.invoke(cli.main, ["model", "--model", "mystery-model"])
    assert result.exit_code == 1
    assert "Model information not provided" in result.output


def test_models_lists_catalog(runner):
    result = runner.invoke(cli.main, ["models"])
    assert result.exit_code == 0
    assert "llama3.1-8b" in result.output
