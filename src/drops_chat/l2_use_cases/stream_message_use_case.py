"""Use case: streaming chat turn — relays provider fragments as they arrive."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from drops_chat.l1_entities.errors import StorageUnavailable, UpstreamError
from drops_chat.l1_entities.message import NewMessage
from drops_chat.l2_use_cases.ports.ai_gateway import AIGateway
from drops_chat.l2_use_cases.ports.message_store import MessageStore
from drops_chat.l2_use_cases.utils.turn_parser import parse_inbound_turn

log = logging.getLogger('drops.relay')


class StreamMessageUseCase:
    """Persists the user turn, then forwards the upstream stream fragment by fragment.

    ``execute`` does not return until the first fragment is in hand, so a
    provider that fails straight away raises UpstreamError before the caller
    has sent anything. Once the returned iterator is running:

    - every fragment is yielded the moment it is read;
    - on completion one assistant turn holding the concatenated text is stored;
    - on a mid-stream UpstreamError the error notice is yielded as the last
      fragment and nothing is stored;
    - if the consumer stops early the provider stream is closed and nothing
      is stored;
    - if storing the reply fails the error notice is yielded after the text.
    """

    def __init__(
        self,
        store: MessageStore,
        gateway: AIGateway,
        *,
        error_notice: str,
        fallback_reply: str,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._error_notice = error_notice
        self._fallback_reply = fallback_reply

    async def execute(self, data: object) -> AsyncGenerator[str, None]:
        """Validate a JSON body and start a streaming turn."""
        turn = parse_inbound_turn(data)
        return await self.start(turn.content)

    async def start(self, prompt: str, *, audio_url: str | None = None) -> AsyncGenerator[str, None]:
        """Persist the user turn for *prompt* and open the relay."""
        user_message = await self._store.create_message(NewMessage(role='user', content=prompt, audio_url=audio_url))
        log.info('Stream turn: user message #%d (%d chars)', user_message.id, len(prompt))

        fragments = self._gateway.stream_text(prompt)
        try:
            first: str | None = await anext(fragments)
        except StopAsyncIteration:
            first = None
        except BaseException:
            await fragments.aclose()
            raise
        return self._relay(first, fragments)

    async def _relay(self, first: str | None, fragments: AsyncGenerator[str, None]) -> AsyncGenerator[str, None]:
        parts: list[str] = []
        try:
            if first is not None:
                parts.append(first)
                yield first
                async for fragment in fragments:
                    parts.append(fragment)
                    yield fragment
        except UpstreamError as e:
            log.error('Stream failed after %d fragments: %s', len(parts), e)
            yield self._error_notice
            return
        finally:
            await fragments.aclose()

        content = ''.join(parts)
        if not content:
            log.warning('Upstream stream produced no text; sending fallback reply')
            content = self._fallback_reply
            yield content

        try:
            assistant_message = await self._store.create_message(NewMessage(role='assistant', content=content))
        except StorageUnavailable as e:
            log.error('Could not store streamed reply (%d chars): %s', len(content), e)
            yield self._error_notice
            return
        log.info(
            'Stream turn: assistant message #%d (%d fragments, %d chars)',
            assistant_message.id,
            len(parts),
            len(content),
        )
