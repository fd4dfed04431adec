"""Ordered item collections backing the list editor forms."""
from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Optional

logger = logging.getLogger(__name__)

ENTER_ITEM_MESSAGE = "Enter an item to add."


class Discipline(enum.Enum):
    """Removal order of an :class:`ItemCollection`."""

    STACK = "stack"
    QUEUE = "queue"

    @property
    def noun(self) -> str:
        return self.value


@dataclass(slots=True)
class EditorNotice:
    """Outcome of an editor action, shown to the user as a modal notice."""

    ok: bool
    message: str
    item: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(slots=True)
class ItemCollection:
    """Text items with stack (LIFO) or queue (FIFO) removal.

    Items are stored in insertion order.  The discipline only decides which
    end :meth:`pop` and :meth:`peek` look at, and the order of iteration:
    a stack iterates most recent first, a queue oldest first.
    """

    discipline: Discipline
    _items: Deque[str] = field(default_factory=deque)

    def push(self, item: str) -> None:
        self._items.append(item)

    def pop(self) -> str:
        if not self._items:
            raise IndexError(f"pop from an empty {self.discipline.noun}")
        if self.discipline is Discipline.STACK:
            return self._items.pop()
        return self._items.popleft()

    def peek(self) -> str:
        if not self._items:
            raise IndexError(f"peek into an empty {self.discipline.noun}")
        if self.discipline is Discipline.STACK:
            return self._items[-1]
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        if self.discipline is Discipline.STACK:
            return reversed(self._items)
        return iter(self._items)


def add_item(collection: ItemCollection, text: Optional[str]) -> EditorNotice:
    """Add ``text`` to ``collection`` unless it is blank."""

    if not text or not text.strip():
        return EditorNotice(False, ENTER_ITEM_MESSAGE)

    collection.push(text)
    logger.debug("Added %r to %s (size %d)", text, collection.discipline.noun, len(collection))
    return EditorNotice(True, f"Item '{text}' added to the {collection.discipline.noun}.", text)


def remove_item(collection: ItemCollection) -> EditorNotice:
    """Remove the next item according to the collection's discipline."""

    noun = collection.discipline.noun
    if collection.is_empty:
        return EditorNotice(False, f"The {noun} is empty.")

    removed = collection.pop()
    logger.debug("Removed %r from %s (size %d)", removed, noun, len(collection))
    return EditorNotice(True, f"Item '{removed}' removed from the {noun}.", removed)


def show_items(collection: ItemCollection) -> List[str]:
    """Return the collection's items in traversal order."""

    return list(collection)


__all__ = [
    "Discipline",
    "EditorNotice",
    "ItemCollection",
    "ENTER_ITEM_MESSAGE",
    "add_item",
    "remove_item",
    "show_items",
]
