"""Prompt Composer: deterministic system prompts for an interactive coding agent."""

from prompt_composer.config import ConfigError, PromptConfig, coerce_config, load_config
from prompt_composer.environment.types import ConnectionParams, EnvironmentSnapshot, SandboxMode
from prompt_composer.overrides import PromptMapping, normalize_url, select_override
from prompt_composer.prompts.builder import append_user_memory, build_system_prompt, get_system_prompt
from prompt_composer.prompts.compression import get_compression_prompt

__version__ = "0.1.0"

__all__ = [
    # Composition
    "get_system_prompt",
    "build_system_prompt",
    "append_user_memory",
    "get_compression_prompt",
    # Environment
    "EnvironmentSnapshot",
    "ConnectionParams",
    "SandboxMode",
    # Overrides
    "PromptMapping",
    "normalize_url",
    "select_override",
    # Configuration
    "PromptConfig",
    "ConfigError",
    "coerce_config",
    "load_config",
]
