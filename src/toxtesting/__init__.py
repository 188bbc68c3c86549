#
# src/toxtesting/__init__.py
#
"""
tox-testing-server: runs a project's tox suite on request over MCP.
"""

# 🔼⚙️
