"""Settings for the configuration fairing itself.

Usage:
    from fairconfig.config import get_settings

    settings = get_settings()
    search_paths = settings.search_paths
"""

from functools import lru_cache

from fairconfig.config.settings import FairConfigSettings


@lru_cache(maxsize=1)
def get_settings() -> FairConfigSettings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload settings.
    """
    return FairConfigSettings()


def reload_settings() -> FairConfigSettings:
    """Clear the settings cache and reload settings.

    Useful for testing or when environment variables have changed.
    """
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "FairConfigSettings"]
