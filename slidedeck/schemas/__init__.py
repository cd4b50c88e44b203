"""Pydantic schemas package for slide and front matter values."""

from slidedeck.schemas.front_matter import (
    FrontMatterDocument,
    FrontMatterValue,
    ListValue,
    Scalar,
)
from slidedeck.schemas.slide import UNORDERED_POSITION, SlideDescriptor

__all__ = [
    # Front matter schemas
    "FrontMatterDocument",
    "FrontMatterValue",
    "ListValue",
    "Scalar",
    # Slide schemas
    "SlideDescriptor",
    "UNORDERED_POSITION",
]
