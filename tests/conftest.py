"""Shared test fixtures and raw ASGI helpers for the envelope test suite."""

from __future__ import annotations

import os

import pytest

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.responses.factory import ResponseFactory


# ---------------------------------------------------------------------------
# Keep ambient ENVELOPE_* variables from leaking into settings under test
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("ENVELOPE_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> EnvelopeSettings:
    return EnvelopeSettings()


@pytest.fixture
def factory() -> ResponseFactory:
    return ResponseFactory()


# ---------------------------------------------------------------------------
# Raw ASGI helpers
# ---------------------------------------------------------------------------

def http_scope(path: str = "/", method: str = "GET") -> dict:
    return {"type": "http", "method": method, "path": path, "headers": []}


async def empty_receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


class MessageRecorder:
    """ASGI ``send`` callable that records every message."""

    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def __call__(self, message: dict) -> None:
        self.messages.append(message)

    @property
    def status(self) -> int | None:
        for message in self.messages:
            if message["type"] == "http.response.start":
                return message["status"]
        return None

    @property
    def headers(self) -> dict[str, str]:
        for message in self.messages:
            if message["type"] == "http.response.start":
                return {k.decode("latin-1"): v.decode("latin-1") for k, v in message["headers"]}
        return {}

    @property
    def body(self) -> bytes:
        return b"".join(
            message.get("body", b"")
            for message in self.messages
            if message["type"] == "http.response.body"
        )


@pytest.fixture
def recorder() -> MessageRecorder:
    return MessageRecorder()


@pytest.fixture
def receive():
    return empty_receive


@pytest.fixture
def scope() -> dict:
    return http_scope()
