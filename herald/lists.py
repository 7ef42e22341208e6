"""List items for nested ordered and unordered lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

__all__ = [
    "ListKind",
    "ListItem",
    "item",
    "items",
    "item_with_children",
    "item_with_ol_children",
]


class ListKind(IntEnum):
    """Whether a list is rendered with bullets or numbers."""

    UNORDERED = 0
    ORDERED = 1


@dataclass(frozen=True)
class ListItem:
    """One entry of a nested list; ``kind`` decides how children render."""

    text: str
    children: Tuple["ListItem", ...] = ()
    kind: ListKind = ListKind.UNORDERED


def item(text: str) -> ListItem:
    """Create a leaf item with no children."""
    return ListItem(text)


def items(*args: str) -> List[ListItem]:
    """Create a leaf item for each given text."""
    return [ListItem(text) for text in args]


def item_with_children(text: str, *args: ListItem) -> ListItem:
    """Create an item whose children form an unordered sub-list."""
    return ListItem(text, tuple(args), ListKind.UNORDERED)


def item_with_ol_children(text: str, *args: ListItem) -> ListItem:
    """Create an item whose children form an ordered sub-list."""
    return ListItem(text, tuple(args), ListKind.ORDERED)