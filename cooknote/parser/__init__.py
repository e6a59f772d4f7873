"""Parsing of recipe notation into the cooknote data model."""

from cooknote.parser.comments import strip_comments
from cooknote.parser.document import ParserState, RecipeParser, parse
from cooknote.parser.items import scan_item, scan_step
from cooknote.parser.metadata import read_metadata_line
from cooknote.parser.quantity import parse_quantity, read_quantity_slot
from cooknote.parser.shopping_list import ShoppingListReader

__all__ = [
    "ParserState",
    "RecipeParser",
    "ShoppingListReader",
    "parse",
    "parse_quantity",
    "read_metadata_line",
    "read_quantity_slot",
    "scan_item",
    "scan_step",
    "strip_comments",
]
