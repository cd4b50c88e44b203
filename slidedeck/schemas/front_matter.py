"""
Front matter schemas.

Front matter values are a tagged variant: a header value is either a
single string or an ordered list of strings. Consumers pattern-match
on the variant instead of inspecting types at runtime.
"""

from pydantic import BaseModel, ConfigDict, Field


class Scalar(BaseModel):
    """A single string front matter value."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Decoded string value")


class ListValue(BaseModel):
    """A bracketed list front matter value, e.g. ``tags: [a, "b"]``."""

    model_config = ConfigDict(frozen=True)

    items: tuple[str, ...] = Field(default=(), description="Decoded list items in order")


FrontMatterValue = Scalar | ListValue


class FrontMatterDocument(BaseModel):
    """
    A markdown document split into its front matter and body.

    ``front_matter`` keeps the header's key order; a key repeated in the
    header holds the value of its last occurrence.
    """

    front_matter: dict[str, FrontMatterValue] = Field(
        default_factory=dict, description="Decoded header fields"
    )
    body: str = Field(default="", description="Document text after the header block")

    def get_text(self, key: str, default: str = "") -> str:
        """
        Get a scalar field as text.

        Args:
            key: Front matter key
            default: Returned when the key is absent or holds a list

        Returns:
            The scalar value or the default
        """
        match self.front_matter.get(key):
            case Scalar(value=value):
                return value
            case _:
                return default

    def get_list(self, key: str) -> list[str]:
        """Get a field as a list; a scalar becomes a one-item list."""
        match self.front_matter.get(key):
            case ListValue(items=items):
                return list(items)
            case Scalar(value=value):
                return [value]
            case _:
                return []
