"""System prompt construction."""

from prompt_composer.prompts.builder import (
    MEMORY_SEPARATOR,
    append_user_memory,
    build_system_prompt,
    environment_sections,
    get_system_prompt,
    render_base_template,
)
from prompt_composer.prompts.compression import get_compression_prompt

__all__ = [
    "MEMORY_SEPARATOR",
    "append_user_memory",
    "build_system_prompt",
    "environment_sections",
    "get_compression_prompt",
    "get_system_prompt",
    "render_base_template",
]
