"""Prompt Composer CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from prompt_composer import __version__
from prompt_composer.config import ConfigError, PromptConfig, load_config
from prompt_composer.environment.resolver import (
    capture_environ,
    read_connection_params,
    resolve_environment,
)
from prompt_composer.overrides import select_override
from prompt_composer.prompts.builder import get_system_prompt
from prompt_composer.prompts.compression import get_compression_prompt


@click.group()
@click.version_option(version=__version__, prog_name="prompt-composer")
@click.option("--verbose", is_flag=True, default=False, help="Log composition details to stderr")
def cli(verbose: bool) -> None:
    """Prompt Composer - build the system prompt for an interactive coding agent."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_settings(settings: str | None) -> PromptConfig:
    if not settings:
        return PromptConfig()
    try:
        return load_config(settings)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--memory", default=None, help="User memory text to append")
@click.option(
    "--memory-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read user memory from a file (overrides --memory)",
)
@click.option(
    "--settings",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON settings file with systemPromptMappings",
)
@click.option(
    "--cwd",
    "working_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory used for git detection (default: current directory)",
)
def show(memory: str | None, memory_file: str | None, settings: str | None, working_dir: str | None) -> None:
    """Print the composed system prompt."""
    config = _load_settings(settings)
    if memory_file:
        try:
            memory = Path(memory_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"Memory file error: {exc}", err=True)
            sys.exit(1)
    click.echo(get_system_prompt(memory, config, working_dir=working_dir))


@cli.command()
@click.option(
    "--settings",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON settings file with systemPromptMappings",
)
@click.option(
    "--cwd",
    "working_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory used for git detection (default: current directory)",
)
def env(settings: str | None, working_dir: str | None) -> None:
    """Show the resolved environment and override match."""
    config = _load_settings(settings)
    environ = capture_environ()
    snapshot = resolve_environment(environ, working_dir=working_dir)
    params = read_connection_params(environ)
    override = select_override(config.system_prompt_mappings, params)

    click.echo(f"Sandbox:    {snapshot.sandbox_mode.value}")
    click.echo(f"Git repo:   {snapshot.in_git_repo}")
    click.echo(f"Directory:  {working_dir or os.getcwd()}")
    click.echo(f"Base URL:   {params.base_url or '(unset)'}")
    click.echo(f"Model:      {params.model_name or '(unset)'}")
    click.echo(f"Mappings:   {len(config.system_prompt_mappings)}")
    click.echo(f"Override:   {'matched' if override is not None else 'none'}")


@cli.command()
def compression() -> None:
    """Print the chat history compression prompt."""
    click.echo(get_compression_prompt())
