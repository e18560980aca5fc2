# pagecomposer/elements.py

from dataclasses import dataclass, replace
from enum import Enum


class ElementType(str, Enum):
    """Block types offered by the palette."""

    HEADING = "Heading"
    PARAGRAPH = "Paragraph"
    IMAGE = "Image"
    LIST = "List"


KNOWN_TYPES = frozenset(t.value for t in ElementType)


def type_name(element_type) -> str:
    """Return the plain tag string for an ElementType or a raw string."""
    if isinstance(element_type, ElementType):
        return element_type.value
    return str(element_type)


def default_content(element_type) -> str:
    return f"New {type_name(element_type)}"


@dataclass(frozen=True)
class Element:
    id: int
    type: str
    content: str

    def __post_init__(self):
        # keep the tag a plain str so equality and json output are stable
        object.__setattr__(self, "type", type_name(self.type))

    @classmethod
    def create(cls, element_id: int, element_type) -> "Element":
        return cls(element_id, type_name(element_type), default_content(element_type))

    @property
    def is_known_type(self) -> bool:
        """False for tags loaded from a newer document; render as plain text."""
        return self.type in KNOWN_TYPES

    @property
    def items(self) -> list:
        """List entries, one per line of content."""
        return self.content.split("\n")

    def with_content(self, content: str) -> "Element":
        return replace(self, content=content)

    def to_dict(self) -> dict:
        return {"id": self.id, "type": self.type, "content": self.content}
