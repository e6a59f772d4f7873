"""Shopping-list section reader.

The shopping list is a trailing section of bracketed category headers,
each followed by item lines::

    [produce]
    bell pepper|capsicum
    onion

    [dairy]
    milk
"""

from __future__ import annotations

import re

from cooknote.models import ShoppingItem, ShoppingList

CATEGORY_RE = re.compile(r"^\s*\[(?P<name>[^\[\]]+)\]\s*$")
SYNONYM_SEPARATOR = "|"


def read_category_header(line: str) -> str | None:
    """Return the trimmed category name if ``line`` is a ``[category]`` header."""
    match = CATEGORY_RE.match(line)
    if not match:
        return None
    name = match.group("name").strip()
    return name or None


def read_shopping_item(line: str) -> ShoppingItem | None:
    """Decode an item line, splitting an optional ``|synonym``."""
    name, separator, synonym = line.partition(SYNONYM_SEPARATOR)
    name = name.strip()
    if not name:
        return None
    synonym = synonym.strip() if separator else ""
    return ShoppingItem(name=name, synonym=synonym or None)


class ShoppingListReader:
    """Accumulates shopping-list lines into categories."""

    def __init__(self) -> None:
        self.categories: ShoppingList = {}
        self._current: str | None = None

    def feed(self, line: str) -> None:
        """Consume one line of the shopping-list section.

        Blank lines are ignored; they separate categories visually but
        items after them still belong to the current category.
        """
        if not line.strip():
            return

        category = read_category_header(line)
        if category is not None:
            self._current = category
            self.categories.setdefault(category, [])
            return

        item = read_shopping_item(line)
        if item is None:
            return
        if self._current is None:
            self._current = ""
        self.categories.setdefault(self._current, []).append(item)
