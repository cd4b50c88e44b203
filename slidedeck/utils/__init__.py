"""Utilities package."""

from slidedeck.utils.file_helpers import generate_slug, parse_position, slide_filename
from slidedeck.utils.front_matter import (
    encode_front_matter,
    extract_front_matter,
    parse_front_matter,
    render_document,
    split_front_matter,
)
from slidedeck.utils.markdown import new_slide_template, split_slide_sections

__all__ = [
    "generate_slug",
    "parse_position",
    "slide_filename",
    "encode_front_matter",
    "extract_front_matter",
    "parse_front_matter",
    "render_document",
    "split_front_matter",
    "new_slide_template",
    "split_slide_sections",
]
