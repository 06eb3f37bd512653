"""Use case: plain (non-streaming) chat turn."""

from __future__ import annotations

import logging

from drops_chat.l1_entities.message import ChatExchange, NewMessage
from drops_chat.l2_use_cases.ports.ai_gateway import AIGateway
from drops_chat.l2_use_cases.ports.message_store import MessageStore
from drops_chat.l2_use_cases.utils.turn_parser import parse_inbound_turn

log = logging.getLogger('drops.relay')


class SendMessageUseCase:
    """Persists the user turn, asks for a one-shot reply, persists the reply.

    If the completion fails the user turn stays stored and no assistant turn
    is written; the UpstreamError propagates to the caller.
    """

    def __init__(self, store: MessageStore, gateway: AIGateway) -> None:
        self._store = store
        self._gateway = gateway

    async def execute(self, data: object) -> ChatExchange:
        turn = parse_inbound_turn(data)
        user_message = await self._store.create_message(NewMessage(role='user', content=turn.content))
        log.info('Plain turn: user message #%d (%d chars)', user_message.id, len(turn.content))

        reply = await self._gateway.complete_text(turn.content)

        assistant_message = await self._store.create_message(NewMessage(role='assistant', content=reply))
        log.info('Plain turn: assistant message #%d (%d chars)', assistant_message.id, len(reply))
        return ChatExchange(user_message=user_message, assistant_message=assistant_message)
