"""Override configuration: prompt mappings and settings-file loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from prompt_composer.overrides import PromptMapping

logger = logging.getLogger("prompt_composer")

_MAPPINGS_KEYS = ("systemPromptMappings", "system_prompt_mappings")


class ConfigError(Exception):
    """Raised when a settings file cannot be read or is not valid JSON."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


@dataclass(frozen=True)
class PromptConfig:
    """Caller-supplied override configuration.

    Mapping order is significant: the first mapping that matches the current
    connection parameters supplies the prompt body.
    """

    system_prompt_mappings: tuple[PromptMapping, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> PromptConfig:
        """Build a config from a settings-file shaped dict.

        Malformed mapping entries are skipped with a warning; anything that is
        not a dict yields an empty config.
        """
        if not isinstance(data, Mapping):
            return cls()

        raw = None
        for key in _MAPPINGS_KEYS:
            if key in data:
                raw = data[key]
                break
        if raw is None:
            return cls()
        if not isinstance(raw, (list, tuple)):
            logger.warning("Ignoring systemPromptMappings: expected a list, got %s", type(raw).__name__)
            return cls()

        mappings: list[PromptMapping] = []
        for index, entry in enumerate(raw):
            mapping = _parse_mapping(entry)
            if mapping is None:
                logger.warning("Skipping malformed prompt mapping at index %d", index)
                continue
            mappings.append(mapping)
        return cls(system_prompt_mappings=tuple(mappings))


def _string_set(value: Any) -> frozenset[str] | None:
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        return None
    if not all(isinstance(v, str) for v in value):
        return None
    return frozenset(value)


def _parse_mapping(entry: Any) -> PromptMapping | None:
    if isinstance(entry, PromptMapping):
        return entry
    if not isinstance(entry, Mapping):
        return None
    base_urls = _string_set(entry.get("baseUrls", entry.get("base_urls")))
    model_names = _string_set(entry.get("modelNames", entry.get("model_names")))
    template = entry.get("template")
    if base_urls is None or model_names is None or not isinstance(template, str):
        return None
    return PromptMapping(base_urls=base_urls, model_names=model_names, template=template)


def coerce_config(config: PromptConfig | Mapping[str, Any] | None) -> PromptConfig:
    """Normalize None, a PromptConfig, or a settings dict into a PromptConfig."""
    if config is None:
        return PromptConfig()
    if isinstance(config, PromptConfig):
        mappings = config.system_prompt_mappings
        if isinstance(mappings, tuple) and all(isinstance(m, PromptMapping) for m in mappings):
            return config
        # Built by hand with settings-shaped entries; validate like a settings file.
        return PromptConfig.from_dict({"system_prompt_mappings": mappings})
    return PromptConfig.from_dict(config)


def load_config(path: str | Path) -> PromptConfig:
    """Load a PromptConfig from a JSON settings file.

    Raises ConfigError if the file cannot be read or parsed. Unknown keys and
    malformed mappings are tolerated.
    """
    settings_path = Path(path)
    try:
        text = settings_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file: {exc}", path=str(settings_path)) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {settings_path} (line {exc.lineno}, column {exc.colno}): {exc.msg}",
            path=str(settings_path),
        ) from exc
    return PromptConfig.from_dict(data)
