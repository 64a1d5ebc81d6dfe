"""System prompt assembly with environment-driven section selection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from prompt_composer.config import PromptConfig, coerce_config
from prompt_composer.environment.resolver import (
    capture_environ,
    read_connection_params,
    resolve_environment,
)
from prompt_composer.environment.types import EnvironmentSnapshot, GitDetector
from prompt_composer.overrides import select_override
from prompt_composer.prompts.sections import (
    BASE_EPILOGUE,
    BASE_PREAMBLE,
    GIT_SECTION,
    SANDBOX_SECTIONS,
)

logger = logging.getLogger("prompt_composer")

MEMORY_SEPARATOR = "\n\n---\n\n"


# --- Conditional sections ---


def environment_sections(snapshot: EnvironmentSnapshot) -> list[str]:
    """Sections chosen by the environment: one sandbox section, then git if applicable."""
    sections = [SANDBOX_SECTIONS[snapshot.sandbox_mode]]
    if snapshot.in_git_repo:
        sections.append(GIT_SECTION)
    return sections


def render_base_template(snapshot: EnvironmentSnapshot) -> str:
    """The built-in prompt with the environment sections in their fixed slot."""
    return "\n\n".join([BASE_PREAMBLE, *environment_sections(snapshot), BASE_EPILOGUE])


# --- User memory ---


def append_user_memory(body: str, user_memory: str | None) -> str:
    """Append trimmed memory after a fixed separator; blank memory adds nothing."""
    trimmed = user_memory.strip() if user_memory else ""
    if not trimmed:
        return body
    return f"{body}{MEMORY_SEPARATOR}{trimmed}"


# --- System prompt assembly ---


def build_system_prompt(
    snapshot: EnvironmentSnapshot,
    override_template: str | None = None,
    user_memory: str | None = None,
) -> str:
    """Compose the prompt from already-resolved inputs.

    An override template is used verbatim as the body and followed by the
    environment sections (an empty template contributes nothing);
    otherwise the built-in template is rendered.
    """
    if override_template is not None:
        parts = [override_template, *environment_sections(snapshot)]
        body = "\n\n".join(part for part in parts if part)
    else:
        body = render_base_template(snapshot)
    return append_user_memory(body, user_memory)


def get_system_prompt(
    user_memory: str | None = None,
    config: PromptConfig | Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    git_detector: GitDetector | None = None,
    working_dir: str | None = None,
) -> str:
    """Compose the agent's system prompt for the current environment.

    The environment is captured once and every later step reads from that
    copy. Never raises for absent or malformed inputs.
    """
    env = capture_environ(environ)
    snapshot = resolve_environment(env, git_detector=git_detector, working_dir=working_dir)
    params = read_connection_params(env)
    override = select_override(coerce_config(config).system_prompt_mappings, params)
    return build_system_prompt(snapshot, override_template=override, user_memory=user_memory)
