# src/toxtesting/cli/config_cmds.py

import click
import structlog
from rich.pretty import pretty_repr

from toxtesting.cli.utils import (
    load_config_or_exit,
    logging_options,
    server_options,
    setup_logging_from_context,
)
from toxtesting.commands import GROUP_TABLE
from toxtesting.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting the server configuration."""
    pass


@config_cli.command(name="show")
@server_options
@logging_options
@click.pass_context
def show_config(ctx: click.Context, app_dir: str | None, timeout: int | None, **kwargs):
    """Load, validate, and display the configuration and test groups."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'config show' command")

    config = load_config_or_exit(ctx, app_dir, timeout)

    # Generate rich-formatted strings and echo them for testability.
    click.echo(pretty_repr(config, expand_all=True))
    click.echo(pretty_repr({name: files.split() for name, files in GROUP_TABLE.items()}, expand_all=True))

# 🔼⚙️
