#
# config/__init__.py
#
"""
Configuration handling sub-package for the tox testing server.

Exports the loading function and the configuration model.
"""

from .loader import APP_DIR_ENV_VAR, TIMEOUT_ENV_VAR, load_config
from .models import ServerConfig

__all__ = [
    "APP_DIR_ENV_VAR",
    "ServerConfig",
    "TIMEOUT_ENV_VAR",
    "load_config",
]

# 🔼⚙️
