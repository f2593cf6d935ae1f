# Mansion/clues.py
"""
Collected clues, kept in an unbalanced binary search tree ordered by text.

Nodes are frozen. Inserting copies the path from the root down to the new
leaf, so a root handed out earlier (e.g. held by an older ExplorationState)
never changes underneath its owner.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional

@dataclass(frozen=True)
class ClueNode:
    text: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


def insert_clue(root: Optional[ClueNode], text: str) -> ClueNode:
    """Insert `text`; if it is already present the same root object comes back."""
    if root is None:
        return ClueNode(text=text)

    if text < root.text:
        left = insert_clue(root.left, text)
        return root if left is root.left else replace(root, left=left)
    if text > root.text:
        right = insert_clue(root.right, text)
        return root if right is root.right else replace(root, right=right)

    return root


def contains_clue(root: Optional[ClueNode], text: str) -> bool:
    node = root
    while node is not None:
        if text == node.text:
            return True
        node = node.left if text < node.text else node.right
    return False


def iter_clues(root: Optional[ClueNode]) -> Iterator[str]:
    """Ascending in-order walk. Read-only, so it can be repeated freely."""
    stack: List[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


def in_order_traverse(root: Optional[ClueNode], visit: Callable[[str], None]) -> None:
    for text in iter_clues(root):
        visit(text)


def count_clues(root: Optional[ClueNode]) -> int:
    if root is None:
        return 0
    return 1 + count_clues(root.left) + count_clues(root.right)


def teardown_clues(root: Optional[ClueNode], release: Callable[[ClueNode], None] | None = None) -> int:
    """Post-order release (children first). Returns the number of nodes released."""
    # Frozen nodes are reclaimed by the GC once the owner drops the root; the returned count is the release accounting.
    if root is None:
        return 0
    released = teardown_clues(root.left, release)
    released += teardown_clues(root.right, release)
    if release is not None:
        release(root)
    return released + 1
