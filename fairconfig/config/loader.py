"""Configuration directory discovery."""

from pathlib import Path

# How many directories above the working directory are searched for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Find the default configuration directory.

    Used when FAIRCONFIG_CONFIG_DIR is not set. Looks for a ``config/``
    directory in the working directory and its parents, falling back to the
    relative path ``config``.
    """
    current = Path.cwd()
    for _ in range(_SEARCH_DEPTH):
        candidate = current / "config"
        if candidate.is_dir():
            return candidate
        current = current.parent
    return Path("config")
