#
# src/toxtesting/testing/__init__.py
#
"""
Test command execution sub-package.
"""
from .protocols import CommandSpec, ExecutionOutcome, ProcessExecutor
from .subprocess_runner import SubprocessExecutor

__all__ = [
    "CommandSpec",
    "ExecutionOutcome",
    "ProcessExecutor",
    "SubprocessExecutor",
]

# 🔼⚙️
