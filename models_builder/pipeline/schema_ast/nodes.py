"""
Raw node definitions for a schema snapshot.

These nodes represent the content and media types exactly as the
platform reports them, before any linking or name cleaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import InconsistentBatchError


class ItemCategory(str, Enum):
    """Published item category a type belongs to."""

    CONTENT = "content"
    MEDIA = "media"


@dataclass
class RawPropertyType:
    """A property declared directly on a raw type."""

    alias: str = ""


@dataclass
class RawComposition:
    """A composition relation naming another type by id.

    The parent of a type shows up as one of its compositions too.
    """

    id: int = 0


@dataclass
class RawContentType:
    """A content or media type as defined in the schema."""

    id: int = 0
    alias: str = ""
    category: ItemCategory = ItemCategory.CONTENT

    # -1 (or any value <= 0) means the type has no parent
    parent_id: int = -1

    properties: list[RawPropertyType] = field(default_factory=list)
    compositions: list[RawComposition] = field(default_factory=list)


@dataclass
class SchemaSnapshot:
    """All raw types of a platform, plus the resolved property types."""

    types: list[RawContentType] = field(default_factory=list)

    # category value -> type alias -> property alias -> semantic type
    property_types: dict[str, dict[str, dict[str, Any]]] = field(default_factory=dict)

    def get_types(self, category: ItemCategory) -> list[RawContentType]:
        """Get the raw types of one category, in snapshot order."""
        return [raw_type for raw_type in self.types if raw_type.category == category]


def to_item_category(value: ItemCategory | str) -> ItemCategory:
    """Coerce a category value, failing on unknown categories."""
    try:
        return ItemCategory(value)
    except ValueError:
        raise InconsistentBatchError(f"Unknown item category {value!r}") from None
