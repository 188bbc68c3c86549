#
# src/toxtesting/commands.py
#
"""
Translates a validated invocation into a single tox command line.
"""
import shlex
from types import MappingProxyType

import structlog

from toxtesting.config.models import ServerConfig
from toxtesting.exceptions import UnknownGroupError
from toxtesting.invocation import (
    AllInvocation,
    CaseInvocation,
    DirectoryInvocation,
    FileInvocation,
    Invocation,
)
from toxtesting.testing.protocols import CommandSpec

log = structlog.get_logger("commands")

RUNNER_PREFIX = "tox --"
DEFAULT_TEST_ROOT = "tests/"

# Traceback suppressed, short summary of non-passing tests.
SUMMARY_FLAGS = "--tb=no -ra"
# One line per failure, for single-file runs.
LINE_TRACEBACK_FLAGS = "--tb=line -ra"

GROUP_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {
        "clients": "tests/test_bluesky_client.py tests/test_reddit_client.py tests/test_reddit_analytics.py",
        "api": "tests/test_admin_platforms_api.py tests/test_user_platforms_api.py tests/test_uploads_api.py",
        "auth": "tests/test_oauth_routes.py tests/test_users_api.py tests/test_uploads_auth.py",
        "uploads": "tests/test_upload_workflow.py tests/test_uploads_media.py",
        "routes": "tests/test_routes.py tests/test_feedback_routes.py",
    }
)


def _quote_paths(paths: str) -> str:
    return " ".join(shlex.quote(path) for path in paths.split())


def _runner_arguments(invocation: Invocation) -> str:
    if isinstance(invocation, AllInvocation):
        if invocation.group is None:
            return f"{DEFAULT_TEST_ROOT} {SUMMARY_FLAGS}"
        files = GROUP_TABLE.get(invocation.group)
        if files is None:
            raise UnknownGroupError(invocation.group, list(GROUP_TABLE))
        return f"{_quote_paths(files)} {SUMMARY_FLAGS}"
    if isinstance(invocation, DirectoryInvocation):
        return f"{shlex.quote(invocation.directory)} {SUMMARY_FLAGS}"
    if isinstance(invocation, FileInvocation):
        return f"{shlex.quote(invocation.test_file)} {LINE_TRACEBACK_FLAGS}"
    if isinstance(invocation, CaseInvocation):
        return shlex.quote(f"{invocation.test_file}::{invocation.test_case}")
    raise TypeError(f"Unsupported invocation type: {type(invocation).__name__}")


def build_command(invocation: Invocation, config: ServerConfig) -> CommandSpec:
    """
    Builds the CommandSpec for one invocation.

    The working directory, timeout and output bound always come from the
    server configuration, never from the invocation.

    Raises:
        UnknownGroupError: if an 'all' invocation names an unknown group.
    """
    command = f"{RUNNER_PREFIX} {_runner_arguments(invocation)}"
    log.debug("Built test command", mode=invocation.mode.value, command=command)
    return CommandSpec(
        command=command,
        working_dir=config.app_dir,
        timeout=float(config.timeout_seconds),
        max_output_bytes=config.max_output_bytes,
        shell=config.shell,
    )


# 🔼⚙️
