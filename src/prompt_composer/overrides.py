"""Override template selection by connection parameters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from prompt_composer.environment.types import ConnectionParams

logger = logging.getLogger("prompt_composer")


@dataclass(frozen=True)
class PromptMapping:
    """A template that replaces the built-in prompt for matching connections.

    A mapping applies only when both the base URL and the model name match.
    """

    base_urls: frozenset[str] = field(default_factory=frozenset)
    model_names: frozenset[str] = field(default_factory=frozenset)
    template: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_urls", _as_frozenset(self.base_urls))
        object.__setattr__(self, "model_names", _as_frozenset(self.model_names))

    def matches(self, base_url: str, model_name: str) -> bool:
        return url_in(base_url, self.base_urls) and model_name in self.model_names


def _as_frozenset(values: str | Iterable[str]) -> frozenset[str]:
    # A bare string is one member, not a set of characters.
    if isinstance(values, str):
        return frozenset({values})
    return frozenset(values)


def normalize_url(url: str) -> str:
    """Strip at most one trailing slash. Nothing else is altered."""
    if url.endswith("/"):
        return url[:-1]
    return url


def url_in(url: str, candidates: Iterable[str]) -> bool:
    target = normalize_url(url)
    return any(normalize_url(candidate) == target for candidate in candidates)


def select_override(
    mappings: Sequence[PromptMapping] | None,
    params: ConnectionParams,
) -> str | None:
    """Return the template of the first mapping matching params, or None.

    None means "use the built-in base template"; it is not an error.
    """
    if not mappings or not params.is_complete:
        return None

    for index, mapping in enumerate(mappings):
        if mapping.matches(params.base_url, params.model_name):
            logger.debug(
                "Override mapping %d matched base_url=%s model=%s",
                index, params.base_url, params.model_name,
            )
            return mapping.template

    logger.debug(
        "No override mapping matched base_url=%s model=%s",
        params.base_url, params.model_name,
    )
    return None
