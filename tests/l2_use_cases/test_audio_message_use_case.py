"""Tests for AudioMessageUseCase — upload checks happen before any side effect."""

from __future__ import annotations

import base64

import pytest

from drops_chat.l1_entities.errors import PayloadTooLarge, UpstreamError, ValidationError
from drops_chat.l2_use_cases.audio_message_use_case import AudioMessageUseCase
from drops_chat.l2_use_cases.stream_message_use_case import StreamMessageUseCase
from drops_chat.l3_interface_adapters.gateways.memory_message_store import InMemoryMessageStore
from tests.conftest import FakeAIGateway

AUDIO = b'\x1aE\xdf\xa3fake-webm-bytes'


def _make_uc(store: InMemoryMessageStore, gateway: FakeAIGateway, max_audio_bytes: int = 1024) -> AudioMessageUseCase:
    stream_uc = StreamMessageUseCase(store, gateway, error_notice='[error]', fallback_reply='fallback')
    return AudioMessageUseCase(gateway, stream_uc, max_audio_bytes=max_audio_bytes)


class TestAudioMessage:
    @pytest.mark.asyncio
    async def test_transcribes_then_streams_reply(self, store: InMemoryMessageStore):
        gateway = FakeAIGateway(fragments=['Sure', ', happy to help'], transcription='  Tell me about Pedro  ')
        relay = await _make_uc(store, gateway).execute(AUDIO, 'clip.webm', 'audio/webm')

        forwarded = [f async for f in relay]

        assert forwarded == ['Sure', ', happy to help']
        assert gateway.transcribe_calls == [(AUDIO, 'clip.webm', 'audio/webm')]
        assert gateway.stream_calls == ['Tell me about Pedro']

        user, assistant = await store.get_all_messages()
        assert user.role == 'user'
        assert user.content == 'Tell me about Pedro'
        prefix = 'data:audio/webm;base64,'
        assert user.audio_url is not None
        assert user.audio_url.startswith(prefix)
        assert base64.b64decode(user.audio_url[len(prefix) :]) == AUDIO
        assert assistant.content == 'Sure, happy to help'

    @pytest.mark.asyncio
    async def test_oversized_payload_rejected_before_transcription(self, store: InMemoryMessageStore):
        gateway = FakeAIGateway()
        uc = _make_uc(store, gateway, max_audio_bytes=8)

        with pytest.raises(PayloadTooLarge) as exc_info:
            await uc.execute(b'x' * 9, 'clip.webm', 'audio/webm')

        assert exc_info.value.limit == 8
        assert gateway.transcribe_calls == []
        assert await store.get_all_messages() == []

    @pytest.mark.asyncio
    async def test_payload_at_limit_accepted(self, store: InMemoryMessageStore, fake_gateway):
        relay = await _make_uc(store, fake_gateway, max_audio_bytes=8).execute(b'x' * 8, 'clip.webm', 'audio/webm')
        await relay.aclose()
        assert len(fake_gateway.transcribe_calls) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize('audio', [None, b''])
    async def test_missing_audio_rejected(self, store: InMemoryMessageStore, fake_gateway, audio):
        with pytest.raises(ValidationError):
            await _make_uc(store, fake_gateway).execute(audio, 'clip.webm', 'audio/webm')
        assert fake_gateway.transcribe_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize('content_type', [None, '', 'text/plain', 'image/png'])
    async def test_non_audio_type_rejected(self, store: InMemoryMessageStore, fake_gateway, content_type):
        with pytest.raises(ValidationError):
            await _make_uc(store, fake_gateway).execute(AUDIO, 'clip.bin', content_type)
        assert fake_gateway.transcribe_calls == []

    @pytest.mark.asyncio
    async def test_transcription_failure_persists_nothing(self, store: InMemoryMessageStore):
        gateway = FakeAIGateway()
        gateway.fail_transcribe = True

        with pytest.raises(UpstreamError):
            await _make_uc(store, gateway).execute(AUDIO, 'clip.webm', 'audio/webm')

        assert await store.get_all_messages() == []
        assert gateway.stream_calls == []

    @pytest.mark.asyncio
    async def test_blank_transcription_persists_nothing(self, store: InMemoryMessageStore):
        gateway = FakeAIGateway(transcription='   ')

        with pytest.raises(ValidationError):
            await _make_uc(store, gateway).execute(AUDIO, 'clip.webm', 'audio/webm')

        assert await store.get_all_messages() == []
