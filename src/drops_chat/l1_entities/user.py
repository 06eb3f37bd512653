"""User entity -- kept for the store's CRUD surface; the chat flow never reads it."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NewUser(BaseModel):
    username: str
    password: str


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    password: str
