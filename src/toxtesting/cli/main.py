# src/toxtesting/cli/main.py

"""
Main CLI entry point for the tox testing server using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from toxtesting.cli.config_cmds import config_cli
from toxtesting.cli.run_cmds import run_cli
from toxtesting.cli.serve_cmds import serve_cli
from toxtesting.cli.utils import logging_options, setup_logging_from_context
from toxtesting.telemetry import StructLogger

try:
    __version__ = version("tox-testing-server")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="tox-testing-server")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    tox-testing-server: run a project's tox suite for MCP clients.

    The application directory comes from --app-dir or TOX_APP_DIR.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx)
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(config_cli)
cli.add_command(run_cli)
cli.add_command(serve_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
