"""Shared fixtures: Flask test client and a fake LLM adapter (no network)."""

import pytest

import app as app_module
import llm_client


class FakeLLM:
    """Returns a canned reply; records prompts for assertions."""

    def __init__(self, reply: str = ""):
        self.reply = reply
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    @property
    def call_count(self) -> int:
        return len(self.prompts)


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as test_client:
        yield test_client


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(llm_client, "call_llm", fake)
    return fake
