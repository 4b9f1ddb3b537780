"""Configuration module using Pydantic Settings.

Usage:
    from creeptick.config import BotSettings

    settings = BotSettings()  # reads CREEPTICK_* environment variables
"""

from creeptick.config.settings import BotSettings

__all__ = [
    "BotSettings",
]
