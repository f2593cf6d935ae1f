# Mansion/suspects.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_TABLE_SIZE = 10

# clue text -> suspect name, loaded once at startup
DEFAULT_ASSOCIATIONS: List[Tuple[str, str]] = [
    ("Um pedaço rasgado de um mapa antigo", "Mordomo"),
    ("Carta ameaçadora", "Sr. Black"),
    ("Cofre trancado com arranhões", "Sr. Black"),
    ("Lenço com as iniciais M.R.", "M.R."),
    ("Marcas de pegadas com lama", "Jardineiro"),
    ("Pá suja de terra", "Jardineiro"),
]


@dataclass
class SuspectEntry:
    clue_key: str
    suspect_name: str
    next: Optional["SuspectEntry"] = None


def djb2(key: str) -> int:
    h = 5381
    for byte in key.encode("utf-8"):
        h = h * 33 + byte
    return h


class SuspectTable:
    """
    Fixed-size chained hash table: clue text -> suspect name.

    The bucket count never changes. Inserting an existing key overwrites its
    suspect (last write wins); new keys are prepended to their bucket chain.
    """

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"SuspectTable size must be a positive int, got {size!r}")
        self.size = size
        self.buckets: List[Optional[SuspectEntry]] = [None] * size

    def bucket_of(self, key: str) -> int:
        return djb2(key) % self.size

    def _find(self, key: str) -> Optional[SuspectEntry]:
        entry = self.buckets[self.bucket_of(key)]
        while entry is not None:
            if entry.clue_key == key:
                return entry
            entry = entry.next
        return None

    def insert(self, key: str, suspect: str) -> None:
        existing = self._find(key)
        if existing is not None:
            logger.debug("Overwriting suspect for %r: %r -> %r", key, existing.suspect_name, suspect)
            existing.suspect_name = suspect
            return

        idx = self.bucket_of(key)
        self.buckets[idx] = SuspectEntry(clue_key=key, suspect_name=suspect, next=self.buckets[idx])
        logger.debug("Inserted %r -> %r into bucket %d", key, suspect, idx)

    def lookup(self, key: str) -> Optional[str]:
        entry = self._find(key)
        return entry.suspect_name if entry is not None else None

    def items(self) -> Iterator[Tuple[str, str]]:
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry.clue_key, entry.suspect_name
                entry = entry.next

    def teardown(self) -> int:
        """Drop every chain node. Returns how many were released; safe to call twice."""
        released = 0
        for idx, head in enumerate(self.buckets):
            entry = head
            while entry is not None:
                nxt = entry.next
                entry.next = None
                released += 1
                entry = nxt
            self.buckets[idx] = None
        logger.debug("Suspect table released %d entries", released)
        return released

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None


def build_suspect_table(associations: Iterable[Tuple[str, str]] = DEFAULT_ASSOCIATIONS, size: int = DEFAULT_TABLE_SIZE) -> SuspectTable:
    table = SuspectTable(size)
    for clue, suspect in associations:
        table.insert(clue, suspect)
    return table
