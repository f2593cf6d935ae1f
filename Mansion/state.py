# Mansion/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from Mansion.house import Room
from Mansion.clues import ClueNode
from Mansion.events import Event

@dataclass(frozen=True)
class ExplorationState:
    current: Room                                  # where the player stands
    clues: Optional[ClueNode] = None               # BST of distinct clues found so far
    finished: bool = False
    turn: int = 0                                  # moves taken
    events: Tuple[Event, ...] = field(default_factory=tuple)


def make_initial_state(root: Room) -> ExplorationState:
    return ExplorationState(current=root)
