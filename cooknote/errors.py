"""Exceptions raised by cooknote.

Parsing and serialization never raise; the only validated input is the
image URL builder's step number.
"""

from __future__ import annotations


class CooknoteError(Exception):
    """Base class for cooknote errors."""


class InvalidImageOptionsError(CooknoteError, ValueError):
    """Image URL options were out of range."""
