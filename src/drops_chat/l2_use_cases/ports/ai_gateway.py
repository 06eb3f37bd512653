"""Port: hosted completion and transcription provider."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Protocol


class AIGateway(Protocol):
    """Abstract AI provider. Zero framework types leak through.

    Every operation is a single pass-through attempt and raises UpstreamError
    on provider or transport failure.
    """

    async def complete_text(self, prompt: str) -> str:
        """One-shot completion. Returns the full reply text."""
        ...

    def stream_text(self, prompt: str) -> AsyncGenerator[str, None]:
        """Streaming completion. Yields fragments in provider order.

        Closing the generator early releases the provider connection.
        """
        ...

    async def transcribe_audio(self, audio: bytes, filename: str, content_type: str) -> str:
        """Transcribe an audio blob. Raises PayloadTooLarge above the size bound."""
        ...
