#
# src/toxtesting/testing/protocols.py
#
"""
Defines protocols and data structures for test command execution.
"""
from pathlib import Path
from typing import Protocol, runtime_checkable

from attrs import define, field


@define(frozen=True, slots=True)
class CommandSpec:
    """
    A fully resolved command line and the bounds it runs under.

    Built fresh for every invocation.
    """
    command: str
    working_dir: Path = field(converter=Path)
    timeout: float
    max_output_bytes: int
    shell: str = "/bin/bash"


@define(frozen=True, slots=True)
class ExecutionOutcome:
    """
    Structured result of running a CommandSpec.

    `exit_code` is None when the process never exited on its own: it could
    not be spawned, it timed out, or it exceeded the output bound.
    """
    stdout: str
    stderr: str
    exit_code: int | None
    error: str | None = None

    @property
    def completed(self) -> bool:
        return self.exit_code is not None

    @property
    def failed(self) -> bool:
        return self.exit_code != 0


@runtime_checkable
class ProcessExecutor(Protocol):
    """
    Protocol for something that can run a CommandSpec to completion.
    """
    async def execute(self, spec: CommandSpec) -> ExecutionOutcome:
        """
        Runs the command described by `spec`.

        Args:
            spec: The command, working directory, timeout and output bound.

        Returns:
            An ExecutionOutcome; process-level failures are reported in it,
            never raised.
        """
        ...

# 🔼⚙️
