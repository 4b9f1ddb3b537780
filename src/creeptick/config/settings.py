"""Configuration settings using Pydantic Settings.

Provides typed bot configuration with environment variable support.

Usage:
    from creeptick.config import BotSettings

    # Load from environment variables (CREEPTICK_*)
    settings = BotSettings()

    # Or override with explicit values
    settings = BotSettings(max_creeps=4)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creeptick.host.models import Part, ResourceType, body_cost


class BotSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the tick loop and spawn decision.

    Attributes:
        max_creeps: Spawning stops once this many creeps exist.
        body: Body parts of every spawned creep.
        name_prefix: Prefix of generated creep names.
        resource: Resource creeps harvest and deliver.
        log_level: Level for the creeptick console logger.

    Environment Variables:
        CREEPTICK_MAX_CREEPS
        CREEPTICK_BODY (JSON list, e.g. '["move", "carry", "work"]')
        CREEPTICK_NAME_PREFIX
        CREEPTICK_RESOURCE
        CREEPTICK_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="CREEPTICK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_creeps: int = Field(default=8, ge=0)
    body: tuple[Part, ...] = Field(
        default=(Part.MOVE, Part.MOVE, Part.CARRY, Part.WORK), min_length=1
    )
    name_prefix: str = "Role:"
    resource: ResourceType = ResourceType.ENERGY
    log_level: str = "DEBUG"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def body_cost(self) -> int:
        """Energy needed to spawn one creep with `body`."""
        return body_cost(self.body)
