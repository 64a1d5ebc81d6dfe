"""Resolve ambient signals into an immutable environment snapshot."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from prompt_composer.environment.git import is_git_repository
from prompt_composer.environment.types import (
    ConnectionParams,
    EnvironmentSnapshot,
    GitDetector,
    SandboxMode,
)

logger = logging.getLogger("prompt_composer")

SANDBOX_ENV_VAR = "SANDBOX"
SEATBELT_SANDBOX_VALUE = "sandbox-exec"
BASE_URL_ENV_VAR = "OPENAI_BASE_URL"
MODEL_ENV_VAR = "OPENAI_MODEL"


def capture_environ(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy the process environment (or the given mapping) once."""
    return dict(os.environ if environ is None else environ)


def sandbox_mode_from_value(value: str | None) -> SandboxMode:
    """Map the sandbox indicator to a mode. Unknown non-empty values are GENERIC."""
    if not value:
        return SandboxMode.NONE
    if value == SEATBELT_SANDBOX_VALUE:
        return SandboxMode.SEATBELT
    return SandboxMode.GENERIC


def resolve_environment(
    environ: Mapping[str, str] | None = None,
    *,
    git_detector: GitDetector | None = None,
    working_dir: str | None = None,
) -> EnvironmentSnapshot:
    """Snapshot the sandbox mode and git status.

    The git detector is invoked on every call; its result is not cached.
    """
    env = capture_environ(environ)
    detector = git_detector or is_git_repository
    sandbox_mode = sandbox_mode_from_value(env.get(SANDBOX_ENV_VAR))
    in_git_repo = bool(detector(working_dir or os.getcwd()))
    logger.debug("Resolved environment: sandbox=%s git=%s", sandbox_mode.value, in_git_repo)
    return EnvironmentSnapshot(sandbox_mode=sandbox_mode, in_git_repo=in_git_repo)


def read_connection_params(environ: Mapping[str, str] | None = None) -> ConnectionParams:
    """Read the base URL and model name. Empty values count as absent."""
    env = capture_environ(environ)
    return ConnectionParams(
        base_url=env.get(BASE_URL_ENV_VAR) or None,
        model_name=env.get(MODEL_ENV_VAR) or None,
    )
