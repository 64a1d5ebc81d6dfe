"""Environment resolution: sandbox mode, git status, connection parameters."""

from prompt_composer.environment.git import is_git_repository
from prompt_composer.environment.resolver import (
    BASE_URL_ENV_VAR,
    MODEL_ENV_VAR,
    SANDBOX_ENV_VAR,
    SEATBELT_SANDBOX_VALUE,
    capture_environ,
    read_connection_params,
    resolve_environment,
    sandbox_mode_from_value,
)
from prompt_composer.environment.types import (
    ConnectionParams,
    EnvironmentSnapshot,
    GitDetector,
    SandboxMode,
)

__all__ = [
    "BASE_URL_ENV_VAR",
    "MODEL_ENV_VAR",
    "SANDBOX_ENV_VAR",
    "SEATBELT_SANDBOX_VALUE",
    "ConnectionParams",
    "EnvironmentSnapshot",
    "GitDetector",
    "SandboxMode",
    "capture_environ",
    "is_git_repository",
    "read_connection_params",
    "resolve_environment",
    "sandbox_mode_from_value",
]
