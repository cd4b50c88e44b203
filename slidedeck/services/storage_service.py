"""
Storage service for slide files.

Defines the storage interface the slide service depends on and the
local filesystem implementation used by default.
"""

from pathlib import Path
from typing import Protocol

from slidedeck.core.config import settings
from slidedeck.core.exceptions import StorageError, StorageReadError
from slidedeck.core.logging import get_logger

logger = get_logger(__name__)


class SlideStorage(Protocol):
    """Interface for listing, reading and writing slide files."""

    def list_files(self, directory: str | Path) -> list[Path]:
        """List files in a directory; empty if it doesn't exist."""
        ...

    def read_all_text(self, path: Path) -> str:
        """Read a whole file as text, raising StorageReadError on failure."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text to a file, raising StorageError on failure."""
        ...

    def exists(self, path: Path) -> bool:
        """Check whether a file exists."""
        ...


class LocalFileStorage:
    """
    Slide storage backed by the local filesystem.

    Directory listings are sorted by name so repeated scans of the
    same directory return files in the same order.
    """

    def __init__(self, encoding: str | None = None) -> None:
        """
        Initialize local storage.

        Args:
            encoding: Text encoding (defaults to SLIDE_ENCODING setting)
        """
        self.encoding = encoding or settings.SLIDE_ENCODING

    def list_files(self, directory: str | Path) -> list[Path]:
        """
        List regular files directly inside a directory.

        Args:
            directory: Directory path

        Returns:
            Files sorted by name (empty if the path is missing or not a directory)

        Raises:
            StorageError: If the directory exists but cannot be listed
        """
        if not directory:
            return []

        path = Path(directory)
        if not path.is_dir():
            logger.debug(f"Not a directory: {path}")
            return []

        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            logger.error(f"Error listing directory {path}: {e}")
            raise StorageError(f"cannot list {path}", details={"path": str(path)}) from e

        return [entry for entry in entries if entry.is_file()]

    def read_all_text(self, path: Path) -> str:
        """
        Read a file as text.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            StorageReadError: If the file is missing, unreadable or not valid text
        """
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(str(path), str(e)) from e

    def write_text(self, path: Path, content: str) -> None:
        """
        Write text to a file, creating parent directories.

        Args:
            path: File path
            content: Text to write

        Raises:
            StorageError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            raise StorageError(f"cannot write {path}", details={"path": str(path)}) from e

    def exists(self, path: Path) -> bool:
        return Path(path).exists()
