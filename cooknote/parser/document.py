"""Line-oriented document parser.

Each line is classified in priority order:

1. blank line: closes the current step paragraph
2. ``>> key: value``: metadata
3. ``[category]``: starts the trailing shopping-list section
4. anything else: step text

Once the shopping-list section starts, every remaining line belongs to it.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from cooknote.models import Recipe, Step
from cooknote.parser.comments import strip_comments
from cooknote.parser.items import scan_step
from cooknote.parser.metadata import read_metadata_line
from cooknote.parser.shopping_list import ShoppingListReader, read_category_header

logger = logging.getLogger(__name__)

LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


class ParserState(Enum):
    """Where the parser is within the document."""

    START = "start"
    STEPS = "steps"
    SHOPPING_LIST = "shopping_list"


class RecipeParser:
    """Parser for recipe notation.

    One instance may be reused; every call to :meth:`parse` starts from a
    fresh state and returns a new Recipe.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.state = ParserState.START
        self._recipe = Recipe()
        self._paragraph: list[str] = []
        self._shopping = ShoppingListReader()

    def parse(self, source: str) -> Recipe:
        """Parse notation text into a Recipe.

        Never raises: text that matches no structure becomes step text.

        Args:
            source: Notation text.

        Returns:
            A new Recipe.
        """
        self._reset()
        text = strip_comments(source or "")

        for line in LINE_SPLIT_RE.split(text):
            self._feed(line)

        self._close_paragraph()
        recipe = self._recipe
        recipe.shopping_list = self._shopping.categories

        logger.debug(
            "Parsed recipe: %d metadata keys, %d steps, %d shopping categories",
            len(recipe.metadata),
            len(recipe.steps),
            len(recipe.shopping_list),
        )
        self._reset()
        return recipe

    def _feed(self, line: str) -> None:
        if self.state is ParserState.SHOPPING_LIST:
            self._shopping.feed(line)
            return

        if not line.strip():
            self._close_paragraph()
            return

        entry = read_metadata_line(line)
        if entry is not None:
            key, value = entry
            if key in self._recipe.metadata:
                logger.debug("Metadata key %r redefined", key)
            self._recipe.metadata[key] = value
            return

        if read_category_header(line) is not None:
            self._close_paragraph()
            self.state = ParserState.SHOPPING_LIST
            self._shopping.feed(line)
            return

        self.state = ParserState.STEPS
        self._paragraph.append(line.strip())

    def _close_paragraph(self) -> None:
        if not self._paragraph:
            return
        step: Step = scan_step(" ".join(self._paragraph))
        self._paragraph = []
        if step:
            self._recipe.steps.append(step)


def parse(source: str) -> Recipe:
    """Parse notation text into a Recipe.

    Examples:
        >>> recipe = parse(">> servings: 2\\nMash @banana.")
        >>> recipe.metadata
        {'servings': '2'}
    """
    return RecipeParser().parse(source)
