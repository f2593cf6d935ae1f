# Mansion/house.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

@dataclass(frozen=True)
class Room:
    name: str
    clue: Optional[str] = None          # None -> nothing to find here
    left: Optional["Room"] = None
    right: Optional["Room"] = None


def make_room(name: str, clue: str = "", left: Optional[Room] = None, right: Optional[Room] = None) -> Room:
    """Build one room. An empty clue string means the room holds no clue."""
    return Room(name=name, clue=clue or None, left=left, right=right)


def is_leaf(room: Room) -> bool:
    return room.left is None and room.right is None


def count_rooms(root: Optional[Room]) -> int:
    if root is None:
        return 0
    return 1 + count_rooms(root.left) + count_rooms(root.right)


def iter_post_order(root: Optional[Room]) -> Iterator[Room]:
    if root is None:
        return
    yield from iter_post_order(root.left)
    yield from iter_post_order(root.right)
    yield root


def teardown_rooms(root: Optional[Room], release: Callable[[Room], None] | None = None) -> int:
    """
    Release a whole subtree, children before their parent.
    Returns how many rooms were released (0 for an empty map).
    """
    # Rooms are frozen and reclaimed by the GC when the map root is dropped; the count is the release accounting.
    released = 0
    for room in iter_post_order(root):
        if release is not None:
            release(room)
        released += 1
    return released


def default_mansion() -> Room:
    # Built bottom-up: a room is frozen once its children are attached.
    escritorio = make_room("Escritório", "Cofre trancado com arranhões")
    biblioteca = make_room("Biblioteca", "Carta ameaçadora", left=escritorio)
    jardim = make_room("Jardim", "Lenço com as iniciais M.R.")
    sala_estar = make_room("Sala de Estar", "", left=biblioteca, right=jardim)

    porao = make_room("Porão", "Pá suja de terra")
    cozinha = make_room("Cozinha", "Marcas de pegadas com lama", right=porao)

    return make_room(
        "Hall de Entrada",
        "Um pedaço rasgado de um mapa antigo",
        left=sala_estar,
        right=cozinha,
    )
