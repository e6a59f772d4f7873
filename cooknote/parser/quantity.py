"""Quantity slot parsing.

The text between an item's braces is an amount optionally followed by
``%units``. Amounts are tried against these forms in order:

1. fraction ``1/2``
2. mixed number ``1 1/2``
3. comma decimal ``1,5``
4. integer ``2`` or dot decimal ``2.5``

Anything else is kept as free text (``a pinch``).
"""

from __future__ import annotations

import re

from cooknote.models import NumericQuantity, Quantity, TextQuantity

UNITS_SEPARATOR = "%"

FRACTION_RE = re.compile(r"^(?P<num>\d+)\s*/\s*(?P<den>\d+)$")
MIXED_RE = re.compile(r"^(?P<whole>\d+)\s+(?P<num>\d+)\s*/\s*(?P<den>\d+)$")
COMMA_DECIMAL_RE = re.compile(r"^(?P<int>\d+),(?P<frac>\d+)$")
INTEGER_RE = re.compile(r"^\d+$")
DECIMAL_RE = re.compile(r"^\d*\.\d+$")


def _fraction(numerator: str, denominator: str) -> float | None:
    # "01/2" stays text; zero-padded numerators are not fractions
    if len(numerator) > 1 and numerator.startswith("0"):
        return None
    den = int(denominator)
    if den == 0:
        return None
    return int(numerator) / den


def parse_quantity(text: str | None) -> Quantity | None:
    """Parse an amount into a numeric or free-text quantity.

    Args:
        text: Amount text without units.

    Returns:
        None for empty input, NumericQuantity when a numeric form matches,
        otherwise TextQuantity holding the trimmed text.

    Examples:
        >>> parse_quantity("1/2")
        NumericQuantity(value=0.5)
        >>> parse_quantity("1,5")
        NumericQuantity(value=1.5)
        >>> parse_quantity("a pinch")
        TextQuantity(text='a pinch')
    """
    if text is None:
        return None
    amount = text.strip()
    if not amount:
        return None

    match = FRACTION_RE.match(amount)
    if match:
        value = _fraction(match.group("num"), match.group("den"))
        if value is not None:
            return NumericQuantity(value)
        return TextQuantity(amount)

    match = MIXED_RE.match(amount)
    if match:
        value = _fraction(match.group("num"), match.group("den"))
        if value is not None:
            return NumericQuantity(int(match.group("whole")) + value)
        return TextQuantity(amount)

    match = COMMA_DECIMAL_RE.match(amount)
    if match:
        return NumericQuantity(float(f"{match.group('int')}.{match.group('frac')}"))

    if INTEGER_RE.match(amount):
        return NumericQuantity(int(amount))
    if DECIMAL_RE.match(amount):
        return NumericQuantity(float(amount))

    return TextQuantity(amount)


def read_quantity_slot(slot: str) -> tuple[Quantity | None, str | None]:
    """Split a quantity slot into its amount and units.

    Only the first ``%`` separates units; the units text is trimmed and
    an empty units string counts as absent.

    Args:
        slot: Text between the item's braces.

    Returns:
        ``(quantity, units)``, either of which may be None.
    """
    amount, separator, units = slot.partition(UNITS_SEPARATOR)
    quantity = parse_quantity(amount)
    if not separator:
        return quantity, None
    units = units.strip()
    return quantity, units or None
