# Mansion/results.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from Mansion.events import Event

@dataclass(frozen=True)
class StepResult:
    ok: bool
    message: str
    events: Tuple[Event, ...] = field(default_factory=tuple)
    # room / clue / suspect / moves, whatever the narrator needs for this step
    data: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def success(message: str, *, events: Tuple[Event, ...] = (), data: Dict[str, Any] | None = None) -> "StepResult":
        return StepResult(True, message, tuple(events), dict(data or {}))

    @staticmethod
    def fail(message: str, *, events: Tuple[Event, ...] = (), data: Dict[str, Any] | None = None) -> "StepResult":
        return StepResult(False, message, tuple(events), dict(data or {}))
