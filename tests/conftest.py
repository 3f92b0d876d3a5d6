"""
Shared fixtures: handler options and a fake Cerebras endpoint.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from cerebras_handler.adapters.cerebras import CerebrasHandler
from cerebras_handler.core.models import HandlerOptions, ModelInfo


@pytest.fixture
def model_info() -> ModelInfo:
    return ModelInfo(
        name="Llama 3.3 70B",
        description="Llama 3.3 70B model from Cerebras",
        max_tokens=4096,
        context_window=8192,
        supports_prompt_cache=True,
        input_price=0.0001,
        output_price=0.0002,
    )


@pytest.fixture
def options(model_info: ModelInfo) -> HandlerOptions:
    return HandlerOptions(api_key="test-key", model_id="llama-3.3-70b", model_info=model_info)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the user's environment and config file out of every test."""
    for name in ("CEREBRAS_API_KEY", "CEREBRAS_MODEL", "CEREBRAS_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


class FakeCerebras:
    """Records requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = self.reply("test response")

    @staticmethod
    def reply(content: str) -> Callable[[httpx.Request], httpx.Response]:
        def respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "id": "chatcmpl-1",
                    "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
                },
            )
        return respond

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


@pytest.fixture
def fake() -> FakeCerebras:
    return FakeCerebras()


@pytest.fixture
def make_handler(fake: FakeCerebras) -> Callable[[HandlerOptions], CerebrasHandler]:
    def build(opts: HandlerOptions) -> CerebrasHandler:
        return CerebrasHandler(opts, client=fake.client())
    return build
