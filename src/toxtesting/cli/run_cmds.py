# src/toxtesting/cli/run_cmds.py

import asyncio

import click
import structlog

from toxtesting.cli.utils import (
    load_config_or_exit,
    logging_options,
    server_options,
    setup_logging_from_context,
)
from toxtesting.exceptions import InvalidParamsError
from toxtesting.invocation import VALID_MODES
from toxtesting.runtime import TOOL_NAME, TestDispatcher
from toxtesting.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")


@click.command(name="run")
@click.option("-m", "--mode", type=click.Choice(VALID_MODES), required=True, help="Test execution mode.")
@click.option("-f", "--test-file", default=None, help="Test file (file and case modes).")
@click.option("-c", "--test-case", default=None, help="Test case within --test-file (case mode).")
@click.option("-d", "--directory", default=None, help="Directory of tests (directory mode).")
@click.option("-g", "--group", default=None, help="Named test group (all mode).")
@server_options
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    mode: str,
    test_file: str | None,
    test_case: str | None,
    directory: str | None,
    group: str | None,
    app_dir: str | None,
    timeout: int | None,
    **kwargs,
):
    """Run the tests once, as the tool would, and print the output.

    Exits 1 when the output looks like a failure, 2 on invalid options.
    """
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    config = load_config_or_exit(ctx, app_dir, timeout)

    candidates = {
        "mode": mode,
        "testFile": test_file,
        "testCase": test_case,
        "directory": directory,
        "group": group,
    }
    arguments = {key: value for key, value in candidates.items() if value is not None}

    dispatcher = TestDispatcher(config)
    try:
        result = asyncio.run(dispatcher.dispatch(TOOL_NAME, arguments))
    except InvalidParamsError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)

    click.echo(result.text)
    log.debug("Run finished", is_error=result.is_error)
    ctx.exit(1 if result.is_error else 0)

# 🔼⚙️
