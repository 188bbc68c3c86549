# src/toxtesting/server/app.py

"""
MCP server exposing the `run_tox_tests` tool over stdio.
"""

import asyncio
import logging
import os
import signal
from collections.abc import Callable
from typing import Any

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from toxtesting.commands import GROUP_TABLE
from toxtesting.config import ServerConfig
from toxtesting.exceptions import InvalidParamsError, UnknownToolError
from toxtesting.invocation import VALID_MODES
from toxtesting.runtime import TOOL_NAME, TestDispatcher
from toxtesting.telemetry import StructLogger
from toxtesting.testing import ProcessExecutor

log: StructLogger = structlog.get_logger("server")

SERVER_NAME = "tox-testing-server"
SERVER_VERSION = "0.1.0"
SHUTDOWN_GRACE_SECONDS = 2.0

TOOL_DEFINITION = types.Tool(
    name=TOOL_NAME,
    description="Run tox tests with different modes and options",
    inputSchema={
        "type": "object",
        "properties": {
            "mode": {
                "type": "string",
                "enum": VALID_MODES,
                "description": "Test execution mode",
            },
            "directory": {
                "type": "string",
                "description": "Directory containing tests to run (required for directory mode)",
            },
            "group": {
                "type": "string",
                "enum": list(GROUP_TABLE),
                "description": "Test group to run in all mode (runs the whole tests/ directory when omitted)",
            },
            "testFile": {
                "type": "string",
                "description": "Specific test file to run (required for file and case modes)",
            },
            "testCase": {
                "type": "string",
                "description": "Specific test case to run (required for case mode)",
            },
        },
        "required": ["mode"],
    },
)


class ToxTestingServer:
    """Binds the dispatcher to an MCP server instance."""

    def __init__(self, config: ServerConfig, executor: ProcessExecutor | None = None):
        self.config = config
        self.dispatcher = TestDispatcher(config, executor)
        self.server: Server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._in_flight: set[asyncio.Task] = set()
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [TOOL_DEFINITION]

        # Registered directly: the decorator form would turn McpError into
        # tool output instead of a protocol error.
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def _handle_call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        result = await self.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """
        Runs the tool and maps errors onto MCP error codes.

        Raises:
            McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS
                for malformed arguments or an unknown group.
        """
        task = asyncio.create_task(self.dispatcher.dispatch(name, arguments))
        self._in_flight.add(task)
        try:
            result = await task
        except UnknownToolError as e:
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(e))) from e
        except InvalidParamsError as e:
            log.warning("Invalid tool arguments", error=str(e), field=e.field)
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(e))) from e
        finally:
            self._in_flight.discard(task)

        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )

    async def cancel_in_flight(self) -> None:
        """Cancels running tool calls; their child processes are killed and reaped."""
        tasks = [task for task in self._in_flight if not task.done()]
        if not tasks:
            return
        log.warning("Cancelling in-flight test runs", count=len(tasks))
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            log.info("Tox Testing MCP server running on stdio", app_dir=str(self.config.app_dir))
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def _handle_signal(sig: int, shutdown_event: asyncio.Event) -> None:
    signame = signal.Signals(sig).name
    log.warning("Received shutdown signal", signal=signame, signal_num=sig)
    if not shutdown_event.is_set():
        shutdown_event.set()
    else:
        log.warning("Shutdown already requested, signal ignored.")


def _force_exit(code: int) -> None:
    logging.shutdown()
    os._exit(code)


async def serve(
    config: ServerConfig,
    shutdown_event: asyncio.Event | None = None,
    executor: ProcessExecutor | None = None,
    force_exit: Callable[[int], None] = _force_exit,
) -> None:
    """
    Runs the server until the client disconnects or SIGINT/SIGTERM arrives.

    On a signal, in-flight test runs are cancelled and the transport is
    closed. The stdio reader blocks in a worker thread that cannot be
    interrupted, so if the transport has not closed within the grace
    period the process exits via `force_exit`.
    """
    shutdown_event = shutdown_event or asyncio.Event()
    server = ToxTestingServer(config, executor)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _handle_signal, sig, shutdown_event)

    server_task = asyncio.create_task(server.run_stdio())
    shutdown_task = asyncio.create_task(shutdown_event.wait())
    try:
        done, _ = await asyncio.wait(
            {server_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED
        )
        if server_task in done:
            log.info("Transport closed by client.")
            shutdown_task.cancel()
            server_task.result()
            return

        log.info("Shutting down tox testing server.")
        await server.cancel_in_flight()
        server_task.cancel()
        done, _ = await asyncio.wait({server_task}, timeout=SHUTDOWN_GRACE_SECONDS)
        if server_task not in done:
            log.warning("Transport did not close in time, exiting.")
            force_exit(0)
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

# 🔼⚙️
