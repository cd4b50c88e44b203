"""
File naming utilities.

Slide files are ordered by a numeric filename prefix, e.g.
``01-intro.md``. These helpers derive positions from names and build
names for new slides.
"""

import re

from slidedeck.core.exceptions import ValidationError
from slidedeck.schemas.slide import UNORDERED_POSITION

# Placeholder slide number for slides created without a position
UNNUMBERED = "XX"

POSITION_PREFIX_RE = re.compile(r"^([0-9]+)")


def parse_position(filename: str) -> int:
    """
    Derive a slide position from its filename.

    Args:
        filename: File name such as ``02-setup.md``

    Returns:
        The leading digit run as an int, or UNORDERED_POSITION when the
        name has no numeric prefix

    Example:
        >>> parse_position("02-setup.md")
        2
        >>> parse_position("intro.md")
        999
    """
    match = POSITION_PREFIX_RE.match(filename)
    if match is None:
        return UNORDERED_POSITION

    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs beyond the int string conversion limit
        return UNORDERED_POSITION


def format_slide_number(position: int | None) -> str:
    """
    Format a position as a two-digit slide number.

    Args:
        position: Slide position, or None for an unnumbered slide

    Returns:
        Zero-padded number such as ``"01"``, or ``"XX"``

    Raises:
        ValidationError: If position is negative
    """
    if position is None:
        return UNNUMBERED
    if position < 0:
        raise ValidationError(
            "Slide position cannot be negative", details={"position": position}
        )
    return f"{position:02d}"


def generate_slug(text: str) -> str:
    """
    Generate URL-friendly slug from text.

    Args:
        text: Text to convert to slug

    Returns:
        URL-friendly slug

    Example:
        >>> generate_slug("Hello World! This is a Test")
        'hello-world-this-is-a-test'
    """
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def slide_filename(title: str, position: int | None = None, extension: str = ".md") -> str:
    """
    Build the filename for a new slide.

    Args:
        title: Slide title
        position: Slide position (None gives an ``XX`` prefix)
        extension: File extension including the dot

    Returns:
        File name such as ``01-intro.md``
    """
    slug = generate_slug(title) or "slide"
    return f"{format_slide_number(position)}-{slug}{extension}"
