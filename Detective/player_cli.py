# Detective/player_cli.py
from __future__ import annotations

import logging
from typing import Iterator, Optional

from Mansion.config import GameConfig, load_game_config
from Mansion.house import Room, default_mansion, teardown_rooms
from Mansion.clues import teardown_clues
from Mansion.suspects import SuspectTable, build_suspect_table
from Mansion.state import ExplorationState
from Mansion.results import StepResult
from Mansion.engine import explore, visited_rooms
from Mansion.verdict import Verdict, evaluate, parse_accusation
from Mansion.perception import render_room, render_moves, render_clues, render_path, render_log, render_verdict

logger = logging.getLogger(__name__)

TITLES = {
    "novice": "=== Detective Quest: Mapa da Mansão ===",
    "adventurer": "=== Detective Quest: Coleta de Pistas ===",
    "master": "=== Detective Quest: O Julgamento Final ===",
}


def _read_choices() -> Iterator[str]:
    """Console tokens, one per prompt. End of input stops the walk."""
    while True:
        try:
            raw = input("Opção: ")
        except EOFError:
            return
        yield raw.strip()


def _read_accusation() -> Optional[str]:
    try:
        raw = input("\nQuem você acusa? ")
    except EOFError:
        return None
    return parse_accusation(raw)


def _narrator(config: GameConfig):
    def on_step(state: ExplorationState, res: StepResult) -> None:
        if "room" in res.data:
            # a room was just entered
            print(render_room(state.current, res, show_clues=config.collects_clues, show_suspects=config.uses_suspects))
            if state.finished:
                print(res.message)
        elif not res.ok:
            print(res.message)
            if res.data.get("moves"):
                print(render_moves(state.current, res.data["moves"]))
        elif state.finished:
            print("\n" + res.message)
    return on_step


def run_session(config: GameConfig, mansion: Room | None = None, table: SuspectTable | None = None) -> Optional[Verdict]:
    """Play one full game. Returns the verdict, or None when nothing was judged."""
    mansion = mansion or default_mansion()
    if config.uses_suspects and table is None:
        table = build_suspect_table(size=config.suspect_table_size)

    logger.info("Starting %s session", config.mode)
    print(TITLES[config.mode])

    state = explore(
        mansion,
        _read_choices(),
        table if config.uses_suspects else None,
        collect_clues=config.collects_clues,
        leaf_ends=config.leaf_ends_exploration,
        on_step=_narrator(config),
    )

    print("\n" + render_path(visited_rooms(state)))
    print(render_log(state.events))
    if config.collects_clues:
        print(render_clues(state.clues))

    verdict = None
    if config.uses_suspects and table is not None:
        accused = _read_accusation()
        if accused is None:
            print("Nenhuma acusação foi feita.")
        else:
            verdict = evaluate(state.clues, table, accused)
            print(render_verdict(verdict))

    # Verdict is in; release clue/suspect structures, then the map.
    if table is not None:
        released = table.teardown()
        logger.debug("Released %d suspect entries", released)
    logger.debug("Released %d clue nodes", teardown_clues(state.clues))
    logger.debug("Released %d rooms", teardown_rooms(mansion))

    print("\nObrigado por jogar Detective Quest!")
    return verdict


def main() -> None:
    config = load_game_config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_session(config)


if __name__ == "__main__":
    main()
