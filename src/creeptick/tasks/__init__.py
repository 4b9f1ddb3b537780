"""Task resolution, execution and fallback discovery."""

from creeptick.tasks.discovery import discover
from creeptick.tasks.executor import precondition, step
from creeptick.tasks.models import Action, ClearReason, StepOutcome

__all__ = [
    "step",
    "precondition",
    "discover",
    "StepOutcome",
    "Action",
    "ClearReason",
]
