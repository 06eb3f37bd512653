"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AssistantConfig(BaseModel):
    model: str
    max_tokens: int = Field(gt=0)
    system_prompt: str
    fallback_reply: str


class TranscriptionConfig(BaseModel):
    model: str
    max_audio_bytes: int = Field(gt=0)


class StreamConfig(BaseModel):
    error_notice: str


class AppConfig(BaseModel):
    assistant: AssistantConfig
    transcription: TranscriptionConfig
    stream: StreamConfig
