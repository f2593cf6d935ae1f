# Mansion/engine.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from Mansion.house import Room, is_leaf
from Mansion.clues import insert_clue
from Mansion.suspects import SuspectTable
from Mansion.state import ExplorationState, make_initial_state
from Mansion.events import Event
from Mansion.results import StepResult

logger = logging.getLogger(__name__)

MOVE_LEFT = "e"
MOVE_RIGHT = "d"
EXIT = "s"

StepCallback = Callable[[ExplorationState, StepResult], None]

# ----------------------------
# Small helpers
# ----------------------------

def emit(state: ExplorationState, *, type: str, args: Dict[str, Any] | None = None) -> Tuple[ExplorationState, Event]:
    """Log an event against the current room and turn."""
    ev = Event(turn=state.turn, type=type, room=state.current.name, args=dict(args or {}))
    return replace(state, events=state.events + (ev,)), ev


# ----------------------------
# Queries
# ----------------------------

def available_moves(room: Room) -> List[str]:
    moves = []
    if room.left is not None:
        moves.append(MOVE_LEFT)
    if room.right is not None:
        moves.append(MOVE_RIGHT)
    moves.append(EXIT)
    return moves

def visited_rooms(state: ExplorationState) -> List[str]:
    return [ev.room for ev in state.events if ev.type == "enter"]


# ----------------------------
# Actions
# ----------------------------

def visit_room(
    state: ExplorationState,
    table: Optional[SuspectTable] = None,
    *,
    collect_clues: bool = True,
    leaf_ends: bool = False,
) -> Tuple[ExplorationState, StepResult]:
    """
    Enter state.current: pick up its clue (if any) and ask the suspect table
    who it points to. With leaf_ends, reaching a dead end finishes the walk.
    """
    room = state.current
    state, enter_ev = emit(state, type="enter")
    events = [enter_ev]
    data: Dict[str, Any] = {"room": room.name, "clue": None, "suspect": None}

    if collect_clues and room.clue:
        state = replace(state, clues=insert_clue(state.clues, room.clue))
        data["clue"] = room.clue
        if table is not None:
            data["suspect"] = table.lookup(room.clue)
        logger.debug("Collected clue %r in %s (suspect=%r)", room.clue, room.name, data["suspect"])
        state, ev = emit(state, type="clue", args={"clue": room.clue, "suspect": data["suspect"]})
        events.append(ev)

    if leaf_ends and is_leaf(room):
        state, ev = emit(state, type="leaf_exit")
        events.append(ev)
        state = replace(state, finished=True)
        data["moves"] = []
        return state, StepResult.success(f"{room.name} não tem mais saídas.", events=tuple(events), data=data)

    data["moves"] = available_moves(room)
    return state, StepResult.success(f"Você está em: {room.name}", events=tuple(events), data=data)


def apply_move(state: ExplorationState, token: str) -> Tuple[ExplorationState, StepResult]:
    if state.finished:
        return state, StepResult.fail("A exploração já terminou.")

    room = state.current
    choice = token.strip()

    if choice == EXIT:
        new_state, ev = emit(state, type="exit")
        new_state = replace(new_state, finished=True)
        return new_state, StepResult.success("Você decidiu encerrar a exploração.", events=(ev,))

    if choice == MOVE_LEFT:
        dst = room.left
    elif choice == MOVE_RIGHT:
        dst = room.right
    else:
        dst = None

    if dst is None:
        # Unknown token or absent child: nothing changes, the step repeats.
        logger.debug("Rejected move %r from %s", token, room.name)
        return state, StepResult.fail("Opção inválida. Tente novamente.", data={"moves": available_moves(room)})

    new_state, ev = emit(state, type="move", args={"src": room.name, "dst": dst.name})
    new_state = replace(new_state, current=dst, turn=state.turn + 1)
    logger.debug("Moved %s -> %s", room.name, dst.name)
    return new_state, StepResult.success(f"OK: seguindo para {dst.name}.", events=(ev,))


def explore(
    root: Room,
    choices: Iterable[str],
    table: Optional[SuspectTable] = None,
    *,
    collect_clues: bool = True,
    leaf_ends: bool = False,
    on_step: StepCallback | None = None,
) -> ExplorationState:
    """
    Run one forward walk from the root. `choices` is pulled lazily, one token
    per step, so it can be a generator reading from the console. Running out
    of choices counts as leaving the mansion.
    """
    def report(st: ExplorationState, res: StepResult) -> None:
        if on_step is not None:
            on_step(st, res)

    state = make_initial_state(root)
    state, res = visit_room(state, table, collect_clues=collect_clues, leaf_ends=leaf_ends)
    report(state, res)

    tokens = iter(choices)
    while not state.finished:
        token = next(tokens, None)
        if token is None:
            state, res = apply_move(state, EXIT)
            report(state, res)
            break

        state, res = apply_move(state, token)
        report(state, res)
        if not res.ok or state.finished:
            continue

        state, res = visit_room(state, table, collect_clues=collect_clues, leaf_ends=leaf_ends)
        report(state, res)

    logger.info("Exploration finished after %d moves", state.turn)
    return state
