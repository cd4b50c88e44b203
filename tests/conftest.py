"""
Pytest configuration and shared fixtures.

Provides slide directories on disk and a mock storage backend so the
slide service can be tested with and without a real filesystem.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from slidedeck.core.exceptions import StorageReadError


def _write_slide(directory: Path, filename: str, title: str, author: str = "Alice") -> Path:
    """Write a slide file with title and author front matter."""
    path = directory / filename
    path.write_text(
        f'---\nlayout: slide\ntitle: "{title}"\nauthor: "{author}"\n---\n\n## {title}\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def slides_dir(tmp_path: Path) -> Path:
    """Directory with two numbered slides and one unnumbered slide."""
    directory = tmp_path / "slides"
    directory.mkdir()
    _write_slide(directory, "intro.md", "Loose Intro", "Carol")
    _write_slide(directory, "02-setup.md", "Setup", "Bob")
    _write_slide(directory, "01-intro.md", "Intro", "Alice")
    (directory / "notes.txt").write_text("not a slide", encoding="utf-8")
    return directory


@pytest.fixture
def mock_storage():
    """Mock storage backend serving slides from an in-memory mapping."""
    files = {
        Path("/deck/10-outro.md"): '---\ntitle: "Outro"\nauthor: "Dana"\n---\nBye',
        Path("/deck/03-demo.md"): "---\ntitle: Demo\ntags: [live, code]\n---\nDemo",
        Path("/deck/03-demo-backup.md"): '---\ntitle: "Demo Backup"\n---\n',
        Path("/deck/broken.md"): None,
        Path("/deck/readme.txt"): "ignored",
    }

    def read_all_text(path: Path) -> str:
        content = files[path]
        if content is None:
            raise StorageReadError(str(path), "permission denied")
        return content

    mock = MagicMock()
    mock.list_files = MagicMock(return_value=list(files))
    mock.read_all_text = MagicMock(side_effect=read_all_text)
    mock.exists = MagicMock(return_value=False)
    mock.write_text = MagicMock(return_value=None)
    mock.files = files

    return mock


@pytest.fixture
def write_slide():
    """Helper for writing slide files inside a test."""
    return _write_slide
