"""Inline item scanning for step text.

Annotated items start with a sigil:

- ``@`` ingredient
- ``#`` cookware
- ``~`` timer

A single-word name needs no braces (``@salt``). Names with spaces must be
closed with a quantity slot, even an empty one (``@sea salt{}``).
"""

from __future__ import annotations

import unicodedata

from cooknote.models import Cookware, Ingredient, Step, StepItem, Text, Timer
from cooknote.parser.quantity import read_quantity_slot

ITEM_TYPES: dict[str, type[Ingredient] | type[Cookware] | type[Timer]] = {
    "@": Ingredient,
    "#": Cookware,
    "~": Timer,
}
SIGILS = frozenset(ITEM_TYPES)

SLOT_OPEN = "{"
SLOT_CLOSE = "}"

# A braced name may not run into another annotation or a block comment
NAME_STOPS = SIGILS | {"["}


def _is_word_char(char: str) -> bool:
    return not char.isspace() and not unicodedata.category(char).startswith("P")


def _find_slot(text: str, start: int, last_close: int) -> tuple[int, int] | None:
    """Locate the ``{...}`` slot for a braced name starting at ``start``."""
    for index in range(start, len(text)):
        char = text[index]
        if char == SLOT_OPEN:
            if index > last_close:
                return None
            return index, text.index(SLOT_CLOSE, index + 1)
        if char in NAME_STOPS:
            return None
    return None


def scan_item(text: str, pos: int, last_close: int | None = None) -> tuple[StepItem, int]:
    """Scan one annotated item at ``pos``.

    Args:
        text: Step text.
        pos: Index of a sigil character in ``text``.
        last_close: Index of the last ``}`` in ``text``; computed when omitted.

    Returns:
        The item and the index just past the consumed text. When no item can
        be formed the sigil is returned as literal Text and the cursor moves
        by one.
    """
    sigil = text[pos]
    item_type = ITEM_TYPES.get(sigil)
    if item_type is None:
        return Text(sigil), pos + 1

    if last_close is None:
        last_close = text.rfind(SLOT_CLOSE)

    slot = _find_slot(text, pos + 1, last_close)
    if slot is not None:
        open_index, close_index = slot
        name = text[pos + 1 : open_index].strip()
        if name or item_type is Timer:
            quantity, units = read_quantity_slot(text[open_index + 1 : close_index])
            return item_type(name=name, quantity=quantity, units=units), close_index + 1

    end = pos + 1
    while end < len(text) and _is_word_char(text[end]):
        end += 1
    if end == pos + 1:
        return Text(sigil), pos + 1
    return item_type(name=text[pos + 1 : end]), end


def scan_step(text: str) -> Step:
    """Split step text into literal Text runs and annotated items.

    Args:
        text: One paragraph of step text, comments already removed.

    Returns:
        Items in reading order. Adjacent literal runs are merged.
    """
    items: Step = []
    last_close = text.rfind(SLOT_CLOSE)
    literal: list[str] = []
    pos = 0
    run_start = 0

    while pos < len(text):
        if text[pos] not in SIGILS:
            pos += 1
            continue

        item, end = scan_item(text, pos, last_close)
        literal.append(text[run_start:pos])
        if isinstance(item, Text):
            literal.append(item.value)
        else:
            if "".join(literal):
                items.append(Text("".join(literal)))
            literal = []
            items.append(item)
        pos = run_start = end

    literal.append(text[run_start:])
    if "".join(literal):
        items.append(Text("".join(literal)))
    return items
