"""Tests for bot settings.

Why these tests exist:
- Defaults must match the documented spawn policy (cap 8, 250-energy body)
- Environment overrides are how deployments tune the bot
"""

import pytest
from pydantic import ValidationError

from creeptick.config import BotSettings
from creeptick.host import Part, ResourceType


def test_defaults(monkeypatch):
    for var in ("MAX_CREEPS", "BODY", "NAME_PREFIX", "RESOURCE", "LOG_LEVEL"):
        monkeypatch.delenv(f"CREEPTICK_{var}", raising=False)

    settings = BotSettings(_env_file=None)

    assert settings.max_creeps == 8
    assert settings.body == (Part.MOVE, Part.MOVE, Part.CARRY, Part.WORK)
    assert settings.body_cost == 250
    assert settings.name_prefix == "Role:"
    assert settings.resource == ResourceType.ENERGY
    assert settings.log_level == "DEBUG"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CREEPTICK_MAX_CREEPS", "3")
    monkeypatch.setenv("CREEPTICK_BODY", '["work", "carry", "move"]')
    monkeypatch.setenv("CREEPTICK_LOG_LEVEL", "info")

    settings = BotSettings(_env_file=None)

    assert settings.max_creeps == 3
    assert settings.body == (Part.WORK, Part.CARRY, Part.MOVE)
    assert settings.body_cost == 200
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "kwargs",
    [{"max_creeps": -1}, {"body": ()}, {"body": ("wings",)}, {"log_level": "LOUD"}],
    ids=["negative-cap", "empty-body", "unknown-part", "unknown-level"],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValidationError):
        BotSettings(_env_file=None, **kwargs)
