"""Unit tests for file naming utilities."""

import pytest

from slidedeck.core.exceptions import ValidationError
from slidedeck.schemas.slide import UNORDERED_POSITION
from slidedeck.utils.file_helpers import (
    format_slide_number,
    generate_slug,
    parse_position,
    slide_filename,
)


class TestParsePosition:
    """Tests for parse_position function."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("01-intro.md", 1),
            ("02-setup.md", 2),
            ("10-outro.md", 10),
            ("007.md", 7),
            ("42intro.md", 42),
        ],
    )
    def test_numeric_prefix(self, filename, expected):
        """Test the leading digit run becomes the position."""
        assert parse_position(filename) == expected

    @pytest.mark.parametrize("filename", ["intro.md", "XX-intro.md", "-01-intro.md", ""])
    def test_no_prefix_uses_sentinel(self, filename):
        """Test names without a digit prefix get the sentinel position."""
        assert parse_position(filename) == UNORDERED_POSITION

    def test_oversized_prefix_uses_sentinel(self):
        """Test a digit run too long to convert gets the sentinel position."""
        assert parse_position("9" * 10000 + "-huge.md") == UNORDERED_POSITION


class TestSlideNaming:
    """Tests for slide number, slug and filename helpers."""

    def test_format_slide_number(self):
        """Test positions are zero padded and None is XX."""
        assert format_slide_number(1) == "01"
        assert format_slide_number(123) == "123"
        assert format_slide_number(None) == "XX"

    def test_negative_position_raises(self):
        """Test negative positions raise ValidationError."""
        with pytest.raises(ValidationError, match="negative"):
            format_slide_number(-1)

    def test_generate_slug(self):
        """Test slugs are lowercase and hyphenated."""
        assert generate_slug("Hello World! This is a Test") == "hello-world-this-is-a-test"
        assert generate_slug("  --Setup &  Install-- ") == "setup-install"

    def test_slide_filename(self):
        """Test filenames combine the slide number and slug."""
        assert slide_filename("Getting Started", 3) == "03-getting-started.md"
        assert slide_filename("Getting Started") == "XX-getting-started.md"
        assert slide_filename("!!!", 1) == "01-slide.md"
