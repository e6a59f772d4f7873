"""Serialization of the data model back to recipe notation.

The output is deterministic but lossy: comments are gone after parsing and
quantities are rendered from their parsed value (``1,5`` becomes ``1.5``).
"""

from __future__ import annotations

from cooknote.models import (
    Metadata,
    Recipe,
    ShoppingItem,
    ShoppingList,
    Step,
    StepItem,
    Text,
)
from cooknote.parser.quantity import UNITS_SEPARATOR
from cooknote.parser.shopping_list import SYNONYM_SEPARATOR

SECTION_SEPARATOR = "\n\n"


def serialize_item(item: StepItem) -> str:
    """Render one step item.

    Annotated items always get a quantity slot so multi-word names stay
    unambiguous when parsed again.
    """
    if isinstance(item, Text):
        return item.value

    slot = ""
    if item.quantity is not None:
        slot += str(item.quantity)
    if item.units:
        slot += UNITS_SEPARATOR + item.units
    return f"{item.sigil}{item.name}{{{slot}}}"


def serialize_step(step: Step) -> str:
    return "".join(serialize_item(item) for item in step)


def serialize_metadata(metadata: Metadata) -> str:
    return "\n".join(f">> {key}: {value}" for key, value in metadata.items())


def serialize_shopping_item(item: ShoppingItem) -> str:
    if item.synonym:
        return f"{item.name}{SYNONYM_SEPARATOR}{item.synonym}"
    return item.name


def serialize_shopping_list(shopping_list: ShoppingList) -> str:
    """Render shopping-list categories.

    Items filed under the unnamed ``""`` category have no header line, so
    they are written first where a reader files them under ``""`` again.
    """
    blocks = []
    unfiled = shopping_list.get("")
    if unfiled:
        blocks.append("\n".join(serialize_shopping_item(item) for item in unfiled))
    for category, items in shopping_list.items():
        if category == "":
            continue
        lines = [f"[{category}]"]
        lines.extend(serialize_shopping_item(item) for item in items)
        blocks.append("\n".join(lines))
    return SECTION_SEPARATOR.join(blocks)


def serialize(recipe: Recipe) -> str:
    """Generate notation text from a Recipe.

    Sections are emitted in order (metadata, steps, shopping list) and
    separated by blank lines. Empty sections are skipped.

    Args:
        recipe: The recipe to render.

    Returns:
        Notation text ending with a newline, or an empty string for an
        empty recipe.
    """
    sections = [
        serialize_metadata(recipe.metadata),
        SECTION_SEPARATOR.join(serialize_step(step) for step in recipe.steps),
        serialize_shopping_list(recipe.shopping_list),
    ]
    body = SECTION_SEPARATOR.join(section for section in sections if section)
    return body + "\n" if body else ""
