#
# config/loader.py
#
"""
Builds the ServerConfig from explicit values and the process environment.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import structlog

from toxtesting.config.models import DEFAULT_TIMEOUT_SECONDS, ServerConfig
from toxtesting.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

APP_DIR_ENV_VAR = "TOX_APP_DIR"
TIMEOUT_ENV_VAR = "TOX_TIMEOUT"


def _parse_timeout(raw: str | int | None) -> int:
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"{TIMEOUT_ENV_VAR} must be a whole number of seconds, got {raw!r}"
        ) from e
    if timeout <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV_VAR} must be positive, got {timeout}")
    return timeout


def load_config(
    app_dir: str | Path | None = None,
    timeout: str | int | None = None,
    environ: Mapping[str, str] | None = None,
) -> ServerConfig:
    """
    Resolves the server configuration.

    Explicit arguments win over environment variables. The application
    directory is mandatory; the timeout defaults to 600 seconds.

    Raises:
        ConfigurationError: if the application directory is missing or not a
            directory, or if the timeout is not a positive integer.
    """
    env = os.environ if environ is None else environ

    raw_app_dir = app_dir if app_dir not in (None, "") else env.get(APP_DIR_ENV_VAR)
    if not raw_app_dir:
        raise ConfigurationError(
            f"{APP_DIR_ENV_VAR} environment variable is required. "
            "It must point to the directory containing tox.ini"
        )

    resolved_dir = Path(raw_app_dir).expanduser()
    if not resolved_dir.is_dir():
        raise ConfigurationError(f"Application directory does not exist or is not a directory: '{resolved_dir}'")

    raw_timeout = timeout if timeout is not None else env.get(TIMEOUT_ENV_VAR)
    config = ServerConfig(app_dir=resolved_dir, timeout_seconds=_parse_timeout(raw_timeout))

    if not (resolved_dir / "tox.ini").is_file():
        log.warning("No tox.ini found in application directory", app_dir=str(resolved_dir))

    log.debug(
        "Configuration loaded",
        app_dir=str(config.app_dir),
        timeout_seconds=config.timeout_seconds,
        max_output_bytes=config.max_output_bytes,
    )
    return config


# 🔼⚙️
