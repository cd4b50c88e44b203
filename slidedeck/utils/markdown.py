"""
Markdown processing utilities for slide bodies.

Provides the new-slide template and splitting of a slide body into
the sections separated by horizontal rules.
"""

import re

from slidedeck.core.config import settings
from slidedeck.utils.file_helpers import format_slide_number
from slidedeck.utils.front_matter import render_document

HORIZONTAL_RULE_RE = re.compile(r"^---\r?$", re.MULTILINE)

PLACEHOLDER_BULLETS = ("Bullet point 1", "Bullet point 2", "Bullet point 3")


def new_slide_template(title: str, author: str, position: int | None = None) -> str:
    """
    Create the markdown skeleton for a new slide.

    Args:
        title: Slide title
        author: Slide author
        position: Slide position/order (None writes ``XX`` as the number)

    Returns:
        Markdown content for the new slide

    Raises:
        ValidationError: If position is negative
        FrontMatterError: If title or author spans several lines
    """
    fields = {
        "layout": settings.SLIDE_LAYOUT,
        "title": title,
        "author": author,
        "slide_number": format_slide_number(position),
    }

    bullets = "\n".join(f"* {bullet}" for bullet in PLACEHOLDER_BULLETS)
    body = (
        f"## {title}\n\n"
        f"### By {author}\n\n"
        f"{bullets}\n\n"
        "---\n\n"
        "### More Content\n\n"
        "* Use horizontal rules (---) to separate slide content\n"
        "* This creates a new slide in the presentation\n"
    )

    return render_document(fields, body, bare_keys=("layout",))


def split_slide_sections(body: str) -> list[str]:
    """
    Split a slide body on horizontal rules.

    Args:
        body: Slide body without front matter

    Returns:
        Non-empty sections, stripped of surrounding whitespace
    """
    sections = HORIZONTAL_RULE_RE.split(body)
    return [section.strip() for section in sections if section.strip()]
