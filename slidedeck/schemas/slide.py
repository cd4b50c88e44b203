"""
Slide schemas.

Defines the read-only descriptor produced for each slide document
found in a slides directory.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Position of slides whose filename has no numeric prefix
UNORDERED_POSITION = 999


class SlideDescriptor(BaseModel):
    """
    Metadata for one slide document.

    Built fresh on every directory scan and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="File name, e.g. 01-intro.md")
    path: Path = Field(..., description="Absolute path of the slide file")
    title: str = Field(default="", description="Title from front matter")
    author: str = Field(default="", description="Author from front matter")
    position: int = Field(
        default=UNORDERED_POSITION, description="Ordering position from the filename prefix"
    )

    @property
    def is_ordered(self) -> bool:
        """Check if the slide has an explicit position prefix."""
        return self.position != UNORDERED_POSITION
