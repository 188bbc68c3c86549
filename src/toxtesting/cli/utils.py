# src/toxtesting/cli/utils.py

import logging

import click
import structlog

from toxtesting.config import APP_DIR_ENV_VAR, TIMEOUT_ENV_VAR, ServerConfig, load_config
from toxtesting.exceptions import ConfigurationError
from toxtesting.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="TOX_TESTING_LOG_LEVEL",
        help="Set the logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="TOX_TESTING_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="TOX_TESTING_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def server_options(f):
    """Decorator adding the application directory and timeout options."""
    f = click.option(
        "-a",
        "--app-dir",
        type=click.Path(file_okay=False, dir_okay=True, path_type=str),
        default=None,
        help=f"Directory containing tox.ini (defaults to ${APP_DIR_ENV_VAR}).",
    )(f)
    f = click.option(
        "-t",
        "--timeout",
        type=click.IntRange(min=1),
        default=None,
        help=f"Seconds before a test run is killed (defaults to ${TIMEOUT_ENV_VAR}, then 600).",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    log_level_str = local_log_level or ctx.obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or ctx.obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else ctx.obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
        log_level_str = "INFO"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def load_config_or_exit(ctx: click.Context, app_dir: str | None, timeout: int | None) -> ServerConfig:
    """Loads the server configuration, exiting with status 1 on failure."""
    try:
        return load_config(app_dir=app_dir, timeout=timeout)
    except ConfigurationError as e:
        log.error("Failed to load configuration", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

# ⚙️🛠️
