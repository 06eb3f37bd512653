"""Chat turn entities."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Role = Literal['user', 'assistant']


class NewMessage(BaseModel):
    """A turn before the store has assigned it an id and timestamp."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: Role
    content: str
    audio_url: str | None = Field(default=None, alias='audioUrl')


class Message(BaseModel):
    """A stored chat turn. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    role: Role
    content: str
    audio_url: str | None = Field(default=None, alias='audioUrl')
    timestamp: datetime


class InboundTurn(BaseModel):
    """Client-submitted text turn. Only user turns may come from outside."""

    content: str
    role: Literal['user'] = 'user'

    @field_validator('content')
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('content must not be blank')
        return v


class ChatExchange(BaseModel):
    """Result of a plain turn: the user turn and the reply, both persisted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_message: Message = Field(alias='userMessage')
    assistant_message: Message = Field(alias='assistantMessage')
