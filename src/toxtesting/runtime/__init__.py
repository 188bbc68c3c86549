#
# src/toxtesting/runtime/__init__.py
#
"""
Request handling shared by the MCP server and the command line.
"""
from .dispatcher import TOOL_NAME, TestDispatcher

__all__ = ["TOOL_NAME", "TestDispatcher"]

# 🔼⚙️
