"""
Front matter processing utilities.

Slide documents start with a header block delimited by ``---`` lines
holding simple ``key: value`` pairs. Values may be double-quoted
strings or bracketed lists; anything else is kept as raw text. The
grammar is deliberately smaller than YAML, so the header is handled by
a custom ``python-frontmatter`` handler rather than the YAML one.
"""

import re
from typing import Any

import frontmatter
from frontmatter.default_handlers import BaseHandler

from slidedeck.core.exceptions import FrontMatterError
from slidedeck.core.logging import get_logger
from slidedeck.schemas.front_matter import (
    FrontMatterDocument,
    FrontMatterValue,
    ListValue,
    Scalar,
)

logger = get_logger(__name__)

DELIMITER = "---"

# Opening delimiter, optional header lines, closing delimiter, rest of text
FRONT_MATTER_RE = re.compile(
    r"\A---\r?\n(?:(.*?)\r?\n)?---(?:\r?\n(.*))?\Z",
    re.DOTALL,
)


def _unquote(value: str) -> str | None:
    """Return the text inside a wrapping pair of double quotes, or None."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return None


def decode_value(raw: str) -> FrontMatterValue:
    """
    Decode a single raw header value.

    Args:
        raw: Trimmed text right of the first colon

    Returns:
        Scalar for quoted or plain text, ListValue for ``[a, "b"]``
    """
    unquoted = _unquote(raw)
    if unquoted is not None:
        return Scalar(value=unquoted)

    if raw.startswith("[") and raw.endswith("]"):
        inner = raw[1:-1]
        if not inner.strip():
            return ListValue(items=())

        items = []
        for item in inner.split(","):
            item = item.strip()
            unquoted_item = _unquote(item)
            items.append(item if unquoted_item is None else unquoted_item)
        return ListValue(items=tuple(items))

    # Unbalanced quotes or brackets stay as raw text
    return Scalar(value=raw)


def decode_front_matter(header: str) -> dict[str, FrontMatterValue]:
    """
    Decode header text into a front matter mapping.

    Blank lines, lines without a colon and lines with nothing left of
    the colon are skipped. A repeated key keeps its first position and
    its last value.

    Args:
        header: Text between the two ``---`` delimiters

    Returns:
        Mapping of keys to decoded values
    """
    fields: dict[str, FrontMatterValue] = {}

    for line_number, line in enumerate(header.splitlines(), start=1):
        line = line.strip()
        if not line or ":" not in line:
            continue

        key, _, raw = line.partition(":")
        key = key.strip()
        if not key:
            logger.debug(f"Skipping header line {line_number} with empty key")
            continue

        fields[key] = decode_value(raw.strip())

    return fields


def _is_single_line(text: str) -> bool:
    return "".join(text.splitlines()) == text


def _as_value(value: Any) -> FrontMatterValue:
    """Coerce plain strings and sequences into front matter values."""
    match value:
        case Scalar() | ListValue():
            return value
        case str():
            return Scalar(value=value)
        case list() | tuple():
            return ListValue(items=tuple(str(item) for item in value))
        case _:
            raise TypeError(f"Unsupported front matter value: {value!r}")


def encode_front_matter(
    fields: dict[str, Any],
    bare_keys: tuple[str, ...] | list[str] = (),
) -> str:
    """
    Encode a front matter mapping as header lines.

    Scalars are double-quoted unless their key is in ``bare_keys``;
    lists are written as ``["a", "b"]``. Bare values are trimmed when
    decoded, and one that starts and ends with ``"`` or ``[`` ``]``
    decodes differently, so only use bare keys for plain words.

    Args:
        fields: Mapping of keys to values (plain str and lists accepted)
        bare_keys: Keys whose scalar values are written without quotes

    Returns:
        Header text without delimiters

    Raises:
        FrontMatterError: If a key is empty or holds a colon, a value
            spans several lines, or a list item holds a comma

    Example:
        >>> encode_front_matter({"layout": "slide", "tags": ["a", "b"]}, ("layout",))
        'layout: slide\\ntags: ["a", "b"]'
    """
    lines = []
    for key, value in fields.items():
        if not key.strip() or ":" in key or not _is_single_line(key):
            raise FrontMatterError(f"Invalid front matter key: {key!r}", details={"key": key})

        match _as_value(value):
            case ListValue(items=items):
                for item in items:
                    if "," in item or not _is_single_line(item):
                        raise FrontMatterError(
                            f"List item for {key} cannot hold commas or line breaks",
                            details={"key": key, "item": item},
                        )
                encoded = "[" + ", ".join(f'"{item}"' for item in items) + "]"
            case Scalar(value=text) if not _is_single_line(text):
                raise FrontMatterError(
                    f"Value for {key} cannot span several lines", details={"key": key}
                )
            case Scalar(value=text) if key in bare_keys:
                encoded = text
            case Scalar(value=text):
                encoded = f'"{text}"'
        lines.append(f"{key}: {encoded}")

    return "\n".join(lines)


class SlideFrontMatterHandler(BaseHandler):
    """
    python-frontmatter handler for the slide header grammar.

    Only a block starting on the very first line counts, and both
    delimiters must be exactly ``---`` on their own line.
    """

    FM_BOUNDARY = FRONT_MATTER_RE
    START_DELIMITER = DELIMITER
    END_DELIMITER = DELIMITER

    def detect(self, text: str) -> bool:
        return self.FM_BOUNDARY.match(text) is not None

    def split(self, text: str) -> tuple[str, str]:
        match = self.FM_BOUNDARY.match(text)
        if match is None:
            raise ValueError("No front matter block at start of text")
        return match.group(1) or "", match.group(2) or ""

    def load(self, fm: str, **kwargs: object) -> dict[str, FrontMatterValue]:
        return decode_front_matter(fm)

    def export(self, metadata: dict[str, object], **kwargs: object) -> str:
        bare_keys = kwargs.get("bare_keys", ())
        return encode_front_matter(metadata, bare_keys=bare_keys)  # type: ignore[arg-type]


handler = SlideFrontMatterHandler()


def split_front_matter(text: str | None) -> tuple[str | None, str]:
    """
    Split a document into header text and body.

    Args:
        text: Document text

    Returns:
        Tuple of (header, body); header is None when the text has no
        leading header block, in which case body is the whole text

    Example:
        >>> split_front_matter("---\\ntitle: T\\n---\\nBody")
        ('title: T', 'Body')
        >>> split_front_matter("Body")
        (None, 'Body')
    """
    if not text:
        return None, ""

    if not handler.detect(text):
        return None, text

    return handler.split(text)


def parse_front_matter(text: str | None) -> FrontMatterDocument:
    """
    Split a markdown document into front matter and body.

    Text without a leading header block is returned whole as the body.
    A header that fails to decode is logged and the whole text is
    returned as the body with no fields.

    Args:
        text: Document text (None and empty give an empty document)

    Returns:
        Parsed document

    Example:
        >>> doc = parse_front_matter('---\\ntitle: "Intro"\\n---\\n# Hi')
        >>> doc.get_text("title"), doc.body
        ('Intro', '# Hi')
    """
    header, body = split_front_matter(text)
    if header is None:
        return FrontMatterDocument(body=body)

    try:
        fields = handler.load(header)
    except Exception as e:
        logger.warning(f"Failed to parse front matter: {e}")
        return FrontMatterDocument(body=text)

    return FrontMatterDocument(front_matter=fields, body=body)


def extract_front_matter(text: str | None) -> tuple[dict[str, FrontMatterValue], str]:
    """
    Extract front matter and body as a tuple.

    Args:
        text: Document text

    Returns:
        Tuple of (front_matter_dict, body)
    """
    document = parse_front_matter(text)
    return document.front_matter, document.body


def render_document(
    fields: dict[str, Any],
    body: str,
    bare_keys: tuple[str, ...] | list[str] = (),
) -> str:
    """
    Combine front matter and body into a markdown document.

    A blank line separates the closing delimiter from the body and the
    document ends with a single newline.

    Args:
        fields: Front matter fields
        body: Markdown body
        bare_keys: Keys whose scalar values are written without quotes

    Returns:
        Complete document text
    """
    post = frontmatter.Post(body)
    post.metadata.update(fields)
    text = frontmatter.dumps(post, handler=handler, bare_keys=tuple(bare_keys))
    return text.rstrip("\n") + "\n"
