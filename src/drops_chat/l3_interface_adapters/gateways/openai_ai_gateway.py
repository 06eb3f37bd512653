"""Gateway: OpenAI-compatible completion + transcription client — implements AIGateway port.

Works with any OpenAI-compatible API that also serves the audio transcription endpoint.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

import httpx
import openai

from drops_chat.l1_entities.config import AssistantConfig, TranscriptionConfig
from drops_chat.l1_entities.errors import PayloadTooLarge, UpstreamError

log = logging.getLogger('drops.llm')

# Anything the SDK or its transport can raise while talking to the provider.
_PROVIDER_ERRORS = (openai.OpenAIError, httpx.HTTPError)


class OpenAIGateway:
    """Wraps openai.AsyncOpenAI to implement the AIGateway protocol.

    Persona, model names and length limits are owned here, not by callers.
    """

    def __init__(
        self,
        assistant: AssistantConfig,
        transcription: TranscriptionConfig,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
    ) -> None:
        self._assistant = assistant
        self._transcription = transcription
        self._client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url)

    def _messages(self, prompt: str) -> list[dict[str, str]]:
        return [
            {'role': 'system', 'content': self._assistant.system_prompt},
            {'role': 'user', 'content': prompt},
        ]

    async def complete_text(self, prompt: str) -> str:
        try:
            resp = await self._client.chat.completions.create(
                model=self._assistant.model,
                messages=self._messages(prompt),  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                max_tokens=self._assistant.max_tokens,
            )
        except _PROVIDER_ERRORS as e:
            log.error('Completion failed: %s: %s', type(e).__name__, e, exc_info=True)
            raise UpstreamError('Failed to generate response from AI assistant') from e
        return resp.choices[0].message.content or self._assistant.fallback_reply

    async def stream_text(self, prompt: str) -> AsyncGenerator[str, None]:
        try:
            stream = await self._client.chat.completions.create(
                model=self._assistant.model,
                messages=self._messages(prompt),  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                max_tokens=self._assistant.max_tokens,
                stream=True,
            )
        except _PROVIDER_ERRORS as e:
            log.error('Opening completion stream failed: %s: %s', type(e).__name__, e, exc_info=True)
            raise UpstreamError('Failed to start response stream from AI assistant') from e

        async with stream:
            try:
                async for chunk in stream:
                    if not chunk.choices:
                        continue
                    delta = chunk.choices[0].delta.content
                    if delta:
                        yield delta
            except _PROVIDER_ERRORS as e:
                log.error('Completion stream broke: %s: %s', type(e).__name__, e, exc_info=True)
                raise UpstreamError('Response stream from AI assistant was interrupted') from e

    async def transcribe_audio(self, audio: bytes, filename: str, content_type: str) -> str:
        limit = self._transcription.max_audio_bytes
        if len(audio) > limit:
            raise PayloadTooLarge(len(audio), limit)
        try:
            resp = await self._client.audio.transcriptions.create(
                model=self._transcription.model,
                file=(filename, audio, content_type),
            )
        except _PROVIDER_ERRORS as e:
            log.error('Transcription failed: %s: %s', type(e).__name__, e, exc_info=True)
            raise UpstreamError('Failed to transcribe audio') from e
        return resp.text
