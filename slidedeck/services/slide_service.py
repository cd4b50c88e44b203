"""
Slide service for slide directory operations.

Scans a directory of markdown slides, reads each one's front matter
and orders the slides by the numeric prefix of their filenames.
"""

from pathlib import Path

from slidedeck.core.config import settings
from slidedeck.core.exceptions import (
    ResourceConflictError,
    ResourceNotFoundError,
    StorageReadError,
    ValidationError,
)
from slidedeck.core.logging import get_logger
from slidedeck.schemas.front_matter import FrontMatterDocument
from slidedeck.schemas.slide import SlideDescriptor
from slidedeck.services.storage_service import LocalFileStorage, SlideStorage
from slidedeck.utils.file_helpers import parse_position, slide_filename
from slidedeck.utils.front_matter import parse_front_matter
from slidedeck.utils.markdown import new_slide_template

logger = get_logger(__name__)


class SlideService:
    """
    Service for slide operations.

    Every call re-reads the directory; nothing is cached between calls.
    """

    def __init__(
        self,
        storage: SlideStorage | None = None,
        slides_dir: str | Path | None = None,
    ) -> None:
        """
        Initialize slide service.

        Args:
            storage: Storage backend (defaults to the local filesystem)
            slides_dir: Directory used when a method gets no directory
                (defaults to SLIDES_DIR setting)
        """
        self.storage = storage or LocalFileStorage()
        self.slides_dir = slides_dir if slides_dir is not None else settings.SLIDES_DIR
        self.extension = settings.SLIDE_EXTENSION

    def _resolve(self, directory: str | Path | None) -> str | Path:
        return self.slides_dir if directory is None else directory

    def list_slides(self, directory: str | Path | None = None) -> list[SlideDescriptor]:
        """
        Get all slides ordered by position.

        Files that can't be read are logged and left out. Slides sharing
        a position keep the order the storage listed them in.

        Args:
            directory: Slides directory (defaults to the service's directory)

        Returns:
            Slide descriptors sorted by position

        Raises:
            StorageError: If the directory itself cannot be listed
        """
        target = self._resolve(directory)
        if not target:
            return []

        slides: list[SlideDescriptor] = []
        for path in self.storage.list_files(target):
            if not path.name.endswith(self.extension):
                continue

            try:
                content = self.storage.read_all_text(path)
            except StorageReadError as e:
                logger.warning(f"Skipping slide {path.name}: {e.message}")
                continue

            document = parse_front_matter(content)
            slides.append(
                SlideDescriptor(
                    filename=path.name,
                    path=path.absolute(),
                    title=document.get_text("title"),
                    author=document.get_text("author"),
                    position=parse_position(path.name),
                )
            )

        # list.sort is stable, ties keep listing order
        slides.sort(key=lambda slide: slide.position)

        logger.info(f"Found {len(slides)} slides in {target}")
        return slides

    def find_slide_by_position(
        self,
        position: int,
        directory: str | Path | None = None,
    ) -> SlideDescriptor | None:
        """
        Find the first slide at a position.

        Args:
            position: Position to look for
            directory: Slides directory (defaults to the service's directory)

        Returns:
            The slide, or None if no slide has that position
        """
        for slide in self.list_slides(directory):
            if slide.position == position:
                return slide
        return None

    def get_slide(
        self,
        position: int,
        directory: str | Path | None = None,
    ) -> SlideDescriptor:
        """
        Get the slide at a position.

        Raises:
            ResourceNotFoundError: If no slide has that position
        """
        slide = self.find_slide_by_position(position, directory)
        if slide is None:
            raise ResourceNotFoundError("Slide", f"position {position}")
        return slide

    def read_slide(self, slide: SlideDescriptor) -> FrontMatterDocument:
        """
        Read and parse a slide's current contents.

        Args:
            slide: Slide descriptor from list_slides

        Returns:
            Parsed slide document

        Raises:
            StorageReadError: If the file can no longer be read
        """
        return parse_front_matter(self.storage.read_all_text(slide.path))

    def create_slide(
        self,
        title: str,
        author: str,
        position: int | None = None,
        directory: str | Path | None = None,
    ) -> Path:
        """
        Write a new slide from the slide template.

        Args:
            title: Slide title
            author: Slide author
            position: Slide position (None names the file ``XX-<slug>.md``)
            directory: Slides directory (defaults to the service's directory)

        Returns:
            Path of the written file

        Raises:
            ValidationError: If title is blank or position is negative
            FrontMatterError: If title or author spans several lines
            ResourceConflictError: If the file already exists
            StorageError: If the file cannot be written
        """
        if not title or not title.strip():
            raise ValidationError("Slide title cannot be empty")

        content = new_slide_template(title, author, position)
        path = Path(self._resolve(directory)) / slide_filename(title, position, self.extension)

        if self.storage.exists(path):
            raise ResourceConflictError(
                f"Slide already exists: {path.name}", details={"path": str(path)}
            )

        self.storage.write_text(path, content)
        logger.info(f"Created slide {path}")
        return path


def list_slides(directory: str | Path | None) -> list[SlideDescriptor]:
    """
    Get all slides in a directory ordered by position.

    Args:
        directory: Slides directory (None or empty gives an empty list)

    Returns:
        Slide descriptors sorted by position
    """
    if not directory:
        return []
    return SlideService().list_slides(directory)


def find_slide_by_position(
    directory: str | Path | None,
    position: int,
) -> SlideDescriptor | None:
    """
    Get a specific slide by position.

    Args:
        directory: Slides directory
        position: Position to look for

    Returns:
        The slide, or None if not found
    """
    if not directory:
        return None
    return SlideService().find_slide_by_position(position, directory)
