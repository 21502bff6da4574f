"""
Type model node definitions.

These nodes represent the linked type graph handed to source
generation. Parent and mixin links point at the single node built
for each id, never at copies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from ..schema_ast.nodes import ItemCategory


@dataclass
class PropertyModel:
    """A property declared directly on a type."""

    alias: str = ""
    name: str = ""

    # Semantic value type, as given by the property type resolver
    clr_type: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "alias": self.alias,
            "name": self.name,
            "clr_type": self.clr_type,
        }


@dataclass(eq=False)
class TypeModel:
    """A content or media type, linked to its parent and mixins."""

    id: int = 0
    alias: str = ""
    name: str = ""
    item_category: ItemCategory = ItemCategory.CONTENT

    # Inheritance
    base_type_id: int = -1
    base_type: TypeModel | None = field(default=None, repr=False)

    # Composition
    is_mixin: bool = False
    mixin_types: list[TypeModel] = field(default_factory=list, repr=False)

    properties: list[PropertyModel] = field(default_factory=list)

    @property
    def has_base_type(self) -> bool:
        return self.base_type_id > 0

    def ancestors(self) -> Iterator[TypeModel]:
        """Iterate over the parent chain, nearest parent first."""
        current = self.base_type
        while current is not None:
            yield current
            current = current.base_type

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data, rendering links as ids."""
        return {
            "id": self.id,
            "alias": self.alias,
            "name": self.name,
            "item_category": self.item_category.value,
            "base_type_id": self.base_type.id if self.base_type else None,
            "is_mixin": self.is_mixin,
            "mixin_type_ids": [mixin.id for mixin in self.mixin_types],
            "properties": [prop.to_dict() for prop in self.properties],
        }
