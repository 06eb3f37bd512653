"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from drops_chat.l1_entities.config import AppConfig
from drops_chat.l1_entities.errors import UpstreamError
from drops_chat.l3_interface_adapters.gateways.memory_message_store import InMemoryMessageStore
from drops_chat.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeAIGateway:
    """Fake AI gateway for L2/L4 tests.

    ``fail_stream_at=i`` raises UpstreamError instead of yielding fragment *i*
    (``i == len(fragments)`` fails after the last one).
    """

    def __init__(
        self,
        reply: str = 'Fake reply',
        fragments: list[str] | None = None,
        transcription: str = 'Hello from audio',
    ):
        self._reply = reply
        self._fragments = list(fragments) if fragments is not None else ['Hello', ', ', 'world']
        self._transcription = transcription
        self.complete_calls: list[str] = []
        self.stream_calls: list[str] = []
        self.transcribe_calls: list[tuple[bytes, str, str]] = []
        self.fail_complete = False
        self.fail_transcribe = False
        self.fail_stream_at: int | None = None
        self.fragments_sent = 0
        self.stream_closed = False
        self.events: list[str] = []

    async def complete_text(self, prompt: str) -> str:
        self.complete_calls.append(prompt)
        if self.fail_complete:
            raise UpstreamError('completion provider down')
        return self._reply

    async def stream_text(self, prompt: str) -> AsyncGenerator[str, None]:
        self.stream_calls.append(prompt)
        try:
            for i, fragment in enumerate(self._fragments):
                if self.fail_stream_at == i:
                    raise UpstreamError('stream broke')
                self.fragments_sent += 1
                self.events.append(f'produce:{fragment}')
                yield fragment
            if self.fail_stream_at == len(self._fragments):
                raise UpstreamError('stream broke')
        finally:
            self.stream_closed = True

    async def transcribe_audio(self, audio: bytes, filename: str, content_type: str) -> str:
        self.transcribe_calls.append((audio, filename, content_type))
        if self.fail_transcribe:
            raise UpstreamError('transcription provider down')
        return self._transcription


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def store() -> InMemoryMessageStore:
    return InMemoryMessageStore()


@pytest.fixture
def fake_gateway() -> FakeAIGateway:
    return FakeAIGateway()


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
assistant:
  model: "gpt-4o-mini"
  max_tokens: 300
transcription:
  max_audio_bytes: 2048
openai:
  base_url: "https://api.groq.com/openai/v1"
server:
  port: 8123
  cors_origins:
    - "https://drops.example.com"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
