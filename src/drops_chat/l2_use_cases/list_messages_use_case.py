"""Use case: read the whole conversation."""

from __future__ import annotations

from drops_chat.l1_entities.message import Message
from drops_chat.l2_use_cases.ports.message_store import MessageStore


class ListMessagesUseCase:
    def __init__(self, store: MessageStore) -> None:
        self._store = store

    async def execute(self) -> list[Message]:
        return await self._store.get_all_messages()
