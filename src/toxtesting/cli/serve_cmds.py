# src/toxtesting/cli/serve_cmds.py

import asyncio
import logging
import sys

import click
import structlog

from toxtesting.cli.utils import (
    load_config_or_exit,
    logging_options,
    server_options,
    setup_logging_from_context,
)
from toxtesting.config import ServerConfig
from toxtesting.server import serve
from toxtesting.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.serve")


def _run_server(config: ServerConfig) -> int:
    try:
        asyncio.run(serve(config))
        return 0
    except KeyboardInterrupt:
        log.warning("Shutdown initiated by KeyboardInterrupt (CTRL-C).")
        return 130
    except Exception:
        log.critical("Server exited with an unhandled exception.", exc_info=True)
        return 1
    finally:
        logging.shutdown()


@click.command(name="serve")
@server_options
@logging_options
@click.pass_context
def serve_cli(ctx: click.Context, app_dir: str | None, timeout: int | None, **kwargs):
    """Serve the run_tox_tests tool over MCP on stdio."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    config = load_config_or_exit(ctx, app_dir, timeout)

    log.info(
        "Starting tox testing server",
        app_dir=str(config.app_dir),
        timeout_seconds=config.timeout_seconds,
    )
    exit_code = _run_server(config)

    if exit_code != 0:
        sys.exit(exit_code)

# 🔼⚙️
