#
# config/models.py
#
"""
Attrs-based data models for the tox testing server configuration.
"""

from pathlib import Path
from typing import Any

from attrs import define, field

DEFAULT_TIMEOUT_SECONDS = 600
DEFAULT_MAX_OUTPUT_BYTES = 50 * 1024 * 1024
DEFAULT_SHELL = "/bin/bash"


def _validate_positive_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is positive."""
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be positive integer, got {value}")


@define(frozen=True, slots=True)
class ServerConfig:
    """
    Process-wide settings, read once at startup and never re-read.

    The application root is where tox.ini lives and is the working
    directory of every test run.
    """
    app_dir: Path = field(converter=Path)
    timeout_seconds: int = field(default=DEFAULT_TIMEOUT_SECONDS, validator=_validate_positive_int)
    max_output_bytes: int = field(default=DEFAULT_MAX_OUTPUT_BYTES, validator=_validate_positive_int)
    shell: str = field(default=DEFAULT_SHELL)


# 🔼⚙️
