"""Default git-repository detector."""

from __future__ import annotations

import subprocess

GIT_TIMEOUT_SECONDS = 5


def is_git_repository(working_dir: str) -> bool:
    """Return True if working_dir is inside a git work tree.

    A missing git binary, a missing directory, or a timeout all count as
    "not a repository".
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            capture_output=True, text=True, cwd=working_dir, timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0 and result.stdout.strip() == "true"
