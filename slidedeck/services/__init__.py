"""Services package for slide storage and slide directory operations."""

from slidedeck.services.slide_service import (
    SlideService,
    find_slide_by_position,
    list_slides,
)
from slidedeck.services.storage_service import LocalFileStorage, SlideStorage

__all__ = [
    "LocalFileStorage",
    "SlideService",
    "SlideStorage",
    "find_slide_by_position",
    "list_slides",
]
