"""Image file names for recipes and their steps.

A recipe's picture sits next to its ``.cook`` file and shares its name:
``Baked Potato.jpg`` for the whole dish, ``Baked Potato.2.jpg`` for step 2.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cooknote.errors import InvalidImageOptionsError
from cooknote.models import ImageURLOptions

DEFAULT_EXTENSION = "png"


def _coerce_options(options: ImageURLOptions | Mapping[str, Any] | None) -> ImageURLOptions:
    if options is None:
        return ImageURLOptions()
    if isinstance(options, ImageURLOptions):
        return options
    unknown = set(options) - {"step", "extension"}
    if unknown:
        raise InvalidImageOptionsError(f"Unknown image options: {', '.join(sorted(unknown))}")
    return ImageURLOptions(step=options.get("step"), extension=options.get("extension"))


def build_image_url(
    name: str,
    options: ImageURLOptions | Mapping[str, Any] | None = None,
) -> str:
    """Build the image URL for a recipe or one of its steps.

    Args:
        name: Recipe name (the ``.cook`` file name without extension).
        options: Optional step number and file extension. The extension
            defaults to ``png``.

    Returns:
        ``name[.step].extension``

    Raises:
        InvalidImageOptionsError: If the step is not a positive integer.

    Examples:
        >>> build_image_url("Baked Potato", {"extension": "jpg", "step": 2})
        'Baked Potato.2.jpg'
        >>> build_image_url("Soup")
        'Soup.png'
    """
    opts = _coerce_options(options)
    step = opts.step

    if step is not None:
        if isinstance(step, bool) or not isinstance(step, int):
            raise InvalidImageOptionsError(f"Step must be an integer, got {step!r}")
        if step < 1:
            raise InvalidImageOptionsError(f"Step must be a positive integer, got {step}")

    extension = opts.extension or DEFAULT_EXTENSION
    url = name
    if step is not None:
        url += f".{step}"
    return f"{url}.{extension}"
