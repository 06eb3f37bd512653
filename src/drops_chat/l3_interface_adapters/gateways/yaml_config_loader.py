"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import yaml

from drops_chat.l1_entities.config import AppConfig
from drops_chat.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads one YAML file (explicit path, else the first existing search path).

    The file holds both the app sections (``assistant``, ``transcription``,
    ``stream``) and the infrastructure sections (``openai``, ``server``);
    callers split them by validating the same dict into different models.
    """

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self._search_paths = list(search_paths) if search_paths is not None else list(DEFAULT_CONFIG_PATHS)

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        path = self._resolve(config_path)
        data = _read_mapping(path) if path is not None else {}
        if overrides:
            deep_merge(data, overrides)
        return data

    def _resolve(self, config_path: str | None) -> Path | None:
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in self._search_paths if p.exists()), None)


def _read_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
