"""Gateway: in-memory message store — implements MessageStore port."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

from drops_chat.l1_entities.message import Message, NewMessage
from drops_chat.l1_entities.user import NewUser, User

log = logging.getLogger('drops.store')

INITIAL_ID = 1


class InMemoryMessageStore:
    """Keeps turns and users in dicts for the life of the process.

    Id assignment and insertion share one lock so concurrent creates, even
    from different threads, never hand out the same id.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: dict[int, Message] = {}
        self._users: dict[int, User] = {}
        self._next_message_id = INITIAL_ID
        self._next_user_id = INITIAL_ID
        self._last_timestamp: datetime | None = None

    async def create_message(self, message: NewMessage) -> Message:
        with self._lock:
            # Wall clock may step backwards; timestamps must not.
            now = datetime.now(timezone.utc)
            if self._last_timestamp is not None and now < self._last_timestamp:
                now = self._last_timestamp
            self._last_timestamp = now
            stored = Message(
                id=self._next_message_id,
                role=message.role,
                content=message.content,
                audio_url=message.audio_url or None,
                timestamp=now,
            )
            self._messages[stored.id] = stored
            self._next_message_id += 1
        log.debug('Stored %s message #%d', stored.role, stored.id)
        return stored

    async def get_all_messages(self) -> list[Message]:
        with self._lock:
            messages = list(self._messages.values())
        # Messages are frozen, so a new list is enough to keep callers off our state.
        return sorted(messages, key=lambda m: (m.timestamp, m.id))

    async def clear_all_messages(self) -> None:
        with self._lock:
            count = len(self._messages)
            self._messages.clear()
            self._next_message_id = INITIAL_ID
        log.info('Cleared %d messages', count)

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            users = list(self._users.values())
        return next((u for u in users if u.username == username), None)

    async def create_user(self, user: NewUser) -> User:
        with self._lock:
            stored = User(id=self._next_user_id, username=user.username, password=user.password)
            self._users[stored.id] = stored
            self._next_user_id += 1
        return stored
