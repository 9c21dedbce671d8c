"""This file defines constants
"""

from typing import Any

UID = "revbot"
"The unique identifier of this bot application."

DEFAULT_PREFIX = "!"
DEFAULT_CONFIG_DIR = "data/config"

LOG_LEVEL_NAMES: set[str] = {
    "CRITICAL",
    "FATAL",
    "ERROR",
    "WARN",
    "WARNING",
    "INFO",
    "DEBUG",
    "NOTSET",
}

DEFAULT_EXTENSIONS: list[dict[str, Any]] = [
    # Add extensions here that should always be loaded upon startup.
    # These can only be excluded through the '--disable-ext' CLI option.
    {"name": f"{__package__}.exts.general"},
    {"name": f"{__package__}.exts.settings"},
    {"name": f"{__package__}.exts.dev"},
]
