"""Data model for parsed recipes.

A recipe is made of three independent parts:

- metadata: ``>> key: value`` header lines, kept as opaque strings
- steps: paragraphs of text with inline ingredients, cookware and timers
- shopping list: categories of items with optional synonyms
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class NumericQuantity:
    """An amount that parsed as a number (integer, decimal or fraction)."""

    value: int | float

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        # plain decimal notation; the quantity grammar has no exponents
        return format(Decimal(repr(value)), "f")

    def to_json_value(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class TextQuantity:
    """A free-text amount such as ``a pinch``, kept verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text

    def to_json_value(self) -> str:
        return self.text


Quantity = Union[NumericQuantity, TextQuantity]


@dataclass
class Text:
    """Literal step text."""

    kind: ClassVar[str] = "text"

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "value": self.value}


@dataclass
class _AnnotatedItem:
    kind: ClassVar[str] = ""
    sigil: ClassVar[str] = ""

    name: str
    quantity: Quantity | None = None
    units: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "name": self.name,
            "quantity": self.quantity.to_json_value() if self.quantity is not None else None,
            "units": self.units,
        }


@dataclass
class Ingredient(_AnnotatedItem):
    """An ``@ingredient{quantity%units}`` annotation."""

    kind: ClassVar[str] = "ingredient"
    sigil: ClassVar[str] = "@"


@dataclass
class Cookware(_AnnotatedItem):
    """A ``#cookware{count}`` annotation.

    Units are accepted by the parser but carry no meaning for cookware.
    """

    kind: ClassVar[str] = "cookware"
    sigil: ClassVar[str] = "#"


@dataclass
class Timer(_AnnotatedItem):
    """A ``~name{duration%units}`` annotation. The name may be empty."""

    kind: ClassVar[str] = "timer"
    sigil: ClassVar[str] = "~"

    name: str = ""


StepItem = Union[Text, Ingredient, Cookware, Timer]
Step = list[StepItem]
Metadata = dict[str, str]


@dataclass
class ShoppingItem:
    """An entry in a shopping-list category."""

    name: str
    synonym: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "synonym": self.synonym}


ShoppingList = dict[str, list[ShoppingItem]]


@dataclass
class ImageURLOptions:
    """Options for :func:`cooknote.images.build_image_url`."""

    step: int | None = None
    extension: str | None = None


@dataclass(init=False)
class Recipe:
    """A parsed recipe.

    Fields are plain and mutable; nothing ties them together after parsing.
    """

    metadata: Metadata = field(default_factory=dict)
    steps: list[Step] = field(default_factory=list)
    shopping_list: ShoppingList = field(default_factory=dict)

    def __init__(
        self,
        source: str | None = None,
        *,
        metadata: Metadata | None = None,
        steps: list[Step] | None = None,
        shopping_list: ShoppingList | None = None,
    ) -> None:
        """Create an empty recipe, or parse one from ``source``.

        Args:
            source: Notation text to parse. Omit for an empty recipe.
            metadata: Initial metadata (ignored when ``source`` is given).
            steps: Initial steps (ignored when ``source`` is given).
            shopping_list: Initial shopping list (ignored when ``source`` is given).
        """
        self.metadata = dict(metadata) if metadata else {}
        self.steps = list(steps) if steps else []
        self.shopping_list = dict(shopping_list) if shopping_list else {}

        if source:
            from cooknote.parser import parse

            parsed = parse(source)
            self.metadata = parsed.metadata
            self.steps = parsed.steps
            self.shopping_list = parsed.shopping_list

    @classmethod
    def from_source(cls, source: str) -> Recipe:
        """Parse notation text into a new recipe."""
        return cls(source)

    @property
    def ingredients(self) -> list[Ingredient]:
        """All ingredients in reading order."""
        return [item for step in self.steps for item in step if isinstance(item, Ingredient)]

    @property
    def cookware(self) -> list[Cookware]:
        """All cookware in reading order."""
        return [item for step in self.steps for item in step if isinstance(item, Cookware)]

    @property
    def timers(self) -> list[Timer]:
        """All timers in reading order."""
        return [item for step in self.steps for item in step if isinstance(item, Timer)]

    def to_cooklang(self) -> str:
        """Generate notation text for this recipe.

        Comments from the original source are not reproduced.
        """
        from cooknote.serializer import serialize

        return serialize(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "metadata": dict(self.metadata),
            "steps": [[item.to_dict() for item in step] for step in self.steps],
            "shopping_list": {
                category: [item.to_dict() for item in items]
                for category, items in self.shopping_list.items()
            },
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
