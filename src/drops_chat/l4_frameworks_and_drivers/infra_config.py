"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from drops_chat.l1_entities.config import AppConfig
from drops_chat.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

DEFAULT_SYSTEM_PROMPT = (
    "You are Indy, Pedro's AI digital assistant for his portfolio website called 'Drops'. "
    "You help visitors explore Pedro's professional life, including his curriculum & skills, "
    'working experience, projects, and booking appointments. Be helpful, friendly, and professional. '
    'Keep responses concise, maximum 100 words.'
)

APP_CONFIG_DEFAULTS: dict = {
    'assistant': {
        'model': 'gpt-4o',
        'max_tokens': 150,
        'system_prompt': DEFAULT_SYSTEM_PROMPT,
        'fallback_reply': "I'm sorry, I couldn't generate a response at the moment.",
    },
    'transcription': {
        'model': 'whisper-1',
        'max_audio_bytes': 10 * 1024 * 1024,
    },
    'stream': {
        'error_notice': '\n\n[Sorry, something went wrong while generating the response. Please try again.]',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → SDK reads OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'


class ServerConfig(BaseModel):
    host: str = '127.0.0.1'
    port: int = 5000
    cors_origins: list[str] = Field(default_factory=list)
    log_level: str = 'INFO'
    log_file: str | None = None


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
