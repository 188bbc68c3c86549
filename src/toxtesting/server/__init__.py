#
# src/toxtesting/server/__init__.py
#
"""
MCP protocol adapter for the tox testing tool.
"""
from .app import TOOL_DEFINITION, ToxTestingServer, serve

__all__ = ["TOOL_DEFINITION", "ToxTestingServer", "serve"]

# 🔼⚙️
