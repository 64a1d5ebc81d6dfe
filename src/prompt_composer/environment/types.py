"""Environment snapshot types and the git detector protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class SandboxMode(Enum):
    NONE = "none"
    GENERIC = "generic"
    SEATBELT = "seatbelt"  # macOS sandbox-exec


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Ambient signals captured once per prompt composition."""

    sandbox_mode: SandboxMode = SandboxMode.NONE
    in_git_repo: bool = False


@dataclass(frozen=True)
class ConnectionParams:
    """Effective base URL and model name, used only as an override matching key."""

    base_url: str | None = None
    model_name: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.base_url) and bool(self.model_name)


class GitDetector(Protocol):
    """Collaborator that reports whether a directory is inside a git work tree."""

    def __call__(self, working_dir: str) -> bool: ...
