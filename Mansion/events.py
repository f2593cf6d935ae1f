# Mansion/events.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

@dataclass(frozen=True)
class Event:
    turn: int
    type: str                      # enter | clue | move | exit | leaf_exit
    room: str
    args: Dict[str, Any] = field(default_factory=dict)   # clue/suspect, or src/dst of a move
