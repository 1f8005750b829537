"""Runtime configuration for the specfilter CLI."""

from .runtime import RuntimeSettings, get_settings

__all__ = ["RuntimeSettings", "get_settings"]
