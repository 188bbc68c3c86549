# src/toxtesting/runtime/dispatcher.py
"""
Runs one `run_tox_tests` call end to end: validate, build, execute, classify.
"""
import traceback
from typing import Any

import structlog

from toxtesting.classifier import ToolResult, build_tool_result
from toxtesting.commands import build_command
from toxtesting.config import ServerConfig
from toxtesting.exceptions import InvalidParamsError, UnknownToolError
from toxtesting.invocation import parse_invocation
from toxtesting.telemetry import StructLogger
from toxtesting.testing import ProcessExecutor, SubprocessExecutor

log: StructLogger = structlog.get_logger("runtime.dispatcher")

TOOL_NAME = "run_tox_tests"


class TestDispatcher:
    """Stateless glue between the protocol adapter and the executor."""

    # Not a pytest test class.
    __test__ = False

    def __init__(self, config: ServerConfig, executor: ProcessExecutor | None = None):
        self.config = config
        self.executor = executor or SubprocessExecutor()
        log.debug("TestDispatcher initialized.", app_dir=str(config.app_dir))

    async def dispatch(self, tool_name: str, arguments: Any) -> ToolResult:
        """
        Handles a single tool call.

        Raises:
            UnknownToolError: if `tool_name` is not `run_tox_tests`.
            InvalidParamsError: if the arguments are malformed or name an
                unknown group. Nothing has been spawned in that case.

        Any other failure is returned as a ToolResult with `is_error` set.
        """
        if tool_name != TOOL_NAME:
            log.warning("Rejected unknown tool", tool=tool_name)
            raise UnknownToolError(tool_name)

        invocation = parse_invocation(arguments)

        try:
            spec = build_command(invocation, self.config)
            log.info(
                "Executing command",
                command=spec.command,
                working_dir=str(spec.working_dir),
            )
            outcome = await self.executor.execute(spec)
            if outcome.failed:
                log.warning("Command execution failed", emoji_key="fail", error=outcome.error)
            else:
                log.info("Command executed successfully", emoji_key="success")
            return build_tool_result(outcome)
        except InvalidParamsError:
            raise
        except Exception as e:
            log.error("Error running tox tests", error=str(e), exc_info=True)
            return ToolResult(
                text=f"Error running tox tests: {e}\n{traceback.format_exc()}",
                is_error=True,
            )

# 🔼⚙️
