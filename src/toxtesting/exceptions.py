#
# src/toxtesting/exceptions.py
#
"""
Custom exceptions for the tox testing server.
"""


class ToxTestingError(Exception):
    """Base class for all tox testing server errors."""

    pass


class ConfigurationError(ToxTestingError):
    """Raised when the process-wide configuration is missing or invalid."""

    pass


class InvalidParamsError(ToxTestingError):
    """Raised when a tool invocation is malformed or incomplete.

    Detected before any process is spawned and surfaced to the caller as a
    protocol error rather than as tool output.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class UnknownGroupError(InvalidParamsError):
    """Raised when an 'all' invocation names a group missing from the group table."""

    def __init__(self, group: str, valid_groups: list[str]):
        self.group = group
        self.valid_groups = valid_groups
        super().__init__(
            f"Invalid test group: {group}. Valid groups are: {', '.join(valid_groups)}",
            field="group",
        )


class UnknownToolError(ToxTestingError):
    """Raised when the caller asks for a tool this server does not provide."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


# 🔼⚙️
