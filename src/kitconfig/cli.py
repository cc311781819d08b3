"""Command-line interface for kit config."""
import logging
import os
from typing import Optional

import click

from .config import (
    HOME_ENV_VAR,
    get_config_value,
    list_config,
    reset_config,
    set_config_value,
)
from .errors import ConfigError
from .output import LogLevel, print_error, print_line, setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--log-level', type=click.Choice([level.value for level in LogLevel]),
              default=None, help='Logging level')
def cli(verbose: bool, log_level: Optional[str]):
    """Kit - model packaging toolkit."""
    if verbose:
        level = logging.DEBUG
    elif log_level:
        level = LogLevel(log_level).to_logging()
    else:
        level = logging.WARNING
    setup_logging(level)


# === Config commands ===

@cli.group()
@click.option('--profile', default=None, help='Use the named configuration profile')
@click.option('--config-home', type=click.Path(file_okay=False), default=None,
              help=f'Configuration home directory (overrides ${HOME_ENV_VAR})')
@click.pass_context
def config(ctx: click.Context, profile: Optional[str], config_home: Optional[str]):
    """Manage configuration."""
    env = dict(os.environ)
    if config_home:
        env[HOME_ENV_VAR] = config_home
    ctx.obj = {"profile": profile, "env": env}


def _scope(ctx: click.Context, profile: Optional[str]) -> tuple[Optional[str], dict]:
    return profile or ctx.obj["profile"], ctx.obj["env"]


def _fail(ctx: click.Context, err: ConfigError):
    logger.debug("Config command failed", exc_info=err)
    print_error(str(err))
    ctx.exit(1)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.option('--profile', default=None, help='Use the named configuration profile')
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str, profile: Optional[str]):
    """Set a configuration value."""
    profile, env = _scope(ctx, profile)
    try:
        set_config_value(key, value, profile=profile, env=env)
    except ConfigError as err:
        _fail(ctx, err)
    else:
        print_line(f"Config '{key}' set to '{value}'")


@config.command("get")
@click.argument("key")
@click.option('--profile', default=None, help='Use the named configuration profile')
@click.pass_context
def config_get(ctx: click.Context, key: str, profile: Optional[str]):
    """Show a configuration value."""
    profile, env = _scope(ctx, profile)
    try:
        value = get_config_value(key, profile=profile, env=env)
    except ConfigError as err:
        _fail(ctx, err)
    else:
        print_line(value)


@config.command("list")
@click.option('--profile', default=None, help='Use the named configuration profile')
@click.pass_context
def config_list(ctx: click.Context, profile: Optional[str]):
    """List all configuration values."""
    profile, env = _scope(ctx, profile)
    try:
        fields = list_config(profile=profile, env=env)
    except ConfigError as err:
        _fail(ctx, err)
    else:
        for name, value in fields:
            print_line(f"{name}: {value}")


@config.command("reset")
@click.option('--profile', default=None, help='Use the named configuration profile')
@click.pass_context
def config_reset(ctx: click.Context, profile: Optional[str]):
    """Reset configuration to default values."""
    profile, env = _scope(ctx, profile)
    try:
        reset_config(profile=profile, env=env)
    except ConfigError as err:
        _fail(ctx, err)
    else:
        print_line("Configuration reset to default values.")


if __name__ == "__main__":
    cli()
