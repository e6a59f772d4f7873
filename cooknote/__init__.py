"""cooknote - parse and write Cooklang-style recipe notation."""

from cooknote.errors import CooknoteError, InvalidImageOptionsError
from cooknote.images import build_image_url
from cooknote.models import (
    Cookware,
    ImageURLOptions,
    Ingredient,
    NumericQuantity,
    Quantity,
    Recipe,
    ShoppingItem,
    Step,
    StepItem,
    Text,
    TextQuantity,
    Timer,
)
from cooknote.parser import parse
from cooknote.serializer import serialize

__version__ = "0.1.0"

__all__ = [
    "CooknoteError",
    "Cookware",
    "ImageURLOptions",
    "Ingredient",
    "InvalidImageOptionsError",
    "NumericQuantity",
    "Quantity",
    "Recipe",
    "ShoppingItem",
    "Step",
    "StepItem",
    "Text",
    "TextQuantity",
    "Timer",
    "__version__",
    "build_image_url",
    "parse",
    "serialize",
]
