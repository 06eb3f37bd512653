"""Port: ordered chat turn storage."""

from __future__ import annotations

from typing import Protocol

from drops_chat.l1_entities.message import Message, NewMessage
from drops_chat.l1_entities.user import NewUser, User


class MessageStore(Protocol):
    """Abstract append-only message store.

    Durable implementations must raise StorageUnavailable when the backing
    storage cannot be reached.
    """

    async def create_message(self, message: NewMessage) -> Message:
        """Assign the next id and the current time, store, and return the record."""
        ...

    async def get_all_messages(self) -> list[Message]:
        """Return a copy of all turns, oldest first."""
        ...

    async def clear_all_messages(self) -> None:
        """Drop every turn and reset the id counter."""
        ...

    async def get_user(self, user_id: int) -> User | None: ...

    async def get_user_by_username(self, username: str) -> User | None: ...

    async def create_user(self, user: NewUser) -> User: ...
