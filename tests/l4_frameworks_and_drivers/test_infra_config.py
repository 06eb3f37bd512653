"""Tests for L4 infra config defaults and build_app_config factory."""

from __future__ import annotations

from drops_chat.l4_frameworks_and_drivers.infra_config import (
    APP_CONFIG_DEFAULTS,
    InfraConfig,
    build_app_config,
)


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.assistant.model == 'gpt-4o'
        assert cfg.assistant.max_tokens == 150
        assert 'Indy' in cfg.assistant.system_prompt
        assert cfg.transcription.model == 'whisper-1'
        assert cfg.transcription.max_audio_bytes == 10 * 1024 * 1024
        assert cfg.stream.error_notice

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config({'assistant': {'model': 'gpt-4o-mini'}, 'transcription': {'max_audio_bytes': 1}})
        assert cfg.assistant.model == 'gpt-4o-mini'
        assert cfg.assistant.max_tokens == 150  # default preserved
        assert cfg.transcription.max_audio_bytes == 1

    def test_does_not_mutate_defaults(self):
        build_app_config({'assistant': {'model': 'other'}})
        assert APP_CONFIG_DEFAULTS['assistant']['model'] == 'gpt-4o'

    def test_infra_keys_ignored(self):
        cfg = build_app_config({'server': {'port': 1}, 'openai': {'api_key': 'sk'}})
        assert cfg.assistant.model == 'gpt-4o'


class TestInfraConfig:
    def test_defaults(self):
        infra = InfraConfig()
        assert infra.openai.api_key is None
        assert infra.openai.base_url == 'https://api.openai.com/v1'
        assert infra.server.host == '127.0.0.1'
        assert infra.server.port == 5000
        assert infra.server.cors_origins == []

    def test_from_raw_yaml_dict(self):
        infra = InfraConfig.model_validate(
            {'assistant': {'model': 'x'}, 'server': {'port': 8123}, 'openai': {'base_url': 'http://localhost:8000/v1'}}
        )
        assert infra.server.port == 8123
        assert infra.openai.base_url == 'http://localhost:8000/v1'
