"""Use case: voice turn — transcribe, then stream a reply to the transcription."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from drops_chat.l1_entities.errors import PayloadTooLarge, ValidationError
from drops_chat.l2_use_cases.ports.ai_gateway import AIGateway
from drops_chat.l2_use_cases.stream_message_use_case import StreamMessageUseCase
from drops_chat.l2_use_cases.utils.audio_encoding import to_data_uri

log = logging.getLogger('drops.relay')


class AudioMessageUseCase:
    """Checks the upload, transcribes it, and hands the text to the streaming turn.

    Size and type are checked before the provider is called; a failed or
    empty transcription leaves the store untouched.
    """

    def __init__(self, gateway: AIGateway, stream_uc: StreamMessageUseCase, *, max_audio_bytes: int) -> None:
        self._gateway = gateway
        self._stream_uc = stream_uc
        self._max_audio_bytes = max_audio_bytes

    async def execute(self, audio: bytes | None, filename: str, content_type: str | None) -> AsyncGenerator[str, None]:
        if not audio:
            raise ValidationError('No audio file provided')
        if not content_type or not content_type.startswith('audio/'):
            raise ValidationError(f'Unsupported audio type: {content_type or "unknown"}')
        if len(audio) > self._max_audio_bytes:
            raise PayloadTooLarge(len(audio), self._max_audio_bytes)

        text = (await self._gateway.transcribe_audio(audio, filename, content_type)).strip()
        log.info('Transcribed %d bytes of %s into %d chars', len(audio), content_type, len(text))
        if not text:
            raise ValidationError('No speech detected in audio')

        return await self._stream_uc.start(text, audio_url=to_data_uri(audio, content_type))
