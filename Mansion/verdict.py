# Mansion/verdict.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from Mansion.clues import ClueNode
from Mansion.suspects import SuspectTable

logger = logging.getLogger(__name__)

Outcome = Literal[
    "sustainable_accusation",
    "insufficient_single_clue",
    "unsupported_accusation",
    "insufficient_no_evidence",
]

# clues needed to make an accusation stick
REQUIRED_CLUES = 2

@dataclass(frozen=True)
class Verdict:
    accused: str
    outcome: Outcome
    count: int

    @property
    def sustained(self) -> bool:
        return self.outcome == "sustainable_accusation"


def parse_accusation(raw: str) -> Optional[str]:
    """Strip the line terminator. Nothing left means no accusation was made."""
    name = raw.rstrip("\r\n")
    if name == "":
        return None
    return name


def count_supporting_clues(root: Optional[ClueNode], table: SuspectTable, accused: str) -> int:
    if root is None:
        return 0
    hit = 1 if table.lookup(root.text) == accused else 0
    return hit + count_supporting_clues(root.left, table, accused) + count_supporting_clues(root.right, table, accused)


def evaluate(root: Optional[ClueNode], table: SuspectTable, accused: str) -> Verdict:
    if root is None:
        return Verdict(accused=accused, outcome="insufficient_no_evidence", count=0)

    count = count_supporting_clues(root, table, accused)
    if count >= REQUIRED_CLUES:
        outcome: Outcome = "sustainable_accusation"
    elif count == 1:
        outcome = "insufficient_single_clue"
    else:
        outcome = "unsupported_accusation"

    logger.info("Accusation of %r: %s (%d supporting clues)", accused, outcome, count)
    return Verdict(accused=accused, outcome=outcome, count=count)
