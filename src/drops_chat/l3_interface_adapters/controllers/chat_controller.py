"""ChatController — owns the relay use cases; the transport layer's only collaborator."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from drops_chat.l1_entities.config import AppConfig
from drops_chat.l1_entities.message import ChatExchange, Message
from drops_chat.l2_use_cases.audio_message_use_case import AudioMessageUseCase
from drops_chat.l2_use_cases.list_messages_use_case import ListMessagesUseCase
from drops_chat.l2_use_cases.ports.ai_gateway import AIGateway
from drops_chat.l2_use_cases.ports.message_store import MessageStore
from drops_chat.l2_use_cases.send_message_use_case import SendMessageUseCase
from drops_chat.l2_use_cases.stream_message_use_case import StreamMessageUseCase


class ChatController:
    """Bridges HTTP handlers to use cases. Holds no per-request state."""

    def __init__(self, config: AppConfig, store: MessageStore, gateway: AIGateway) -> None:
        self._list_uc = ListMessagesUseCase(store)
        self._send_uc = SendMessageUseCase(store, gateway)
        self._stream_uc = StreamMessageUseCase(
            store,
            gateway,
            error_notice=config.stream.error_notice,
            fallback_reply=config.assistant.fallback_reply,
        )
        self._audio_uc = AudioMessageUseCase(
            gateway,
            self._stream_uc,
            max_audio_bytes=config.transcription.max_audio_bytes,
        )

    async def list_messages(self) -> list[Message]:
        return await self._list_uc.execute()

    async def send_message(self, data: object) -> ChatExchange:
        return await self._send_uc.execute(data)

    async def stream_message(self, data: object) -> AsyncGenerator[str, None]:
        return await self._stream_uc.execute(data)

    async def send_audio(self, audio: bytes | None, filename: str, content_type: str | None) -> AsyncGenerator[str, None]:
        return await self._audio_uc.execute(audio, filename, content_type)
