"""
Property type resolution.

The semantic type of a property is owned by the platform; the builder
only asks for it through a resolver callable.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..errors import UnresolvedPropertyTypeError
from ..schema_ast.nodes import ItemCategory, SchemaSnapshot


class PropertyTypeResolver(Protocol):
    """Returns the semantic type of a property of a published type."""

    def __call__(self, category: ItemCategory, type_alias: str, property_alias: str) -> Any: ...


class SnapshotPropertyTypeResolver:
    """Resolves property types from the table recorded in a snapshot."""

    def __init__(self, property_types: dict[str, dict[str, dict[str, Any]]]):
        """
        Initialize the resolver.

        Args:
            property_types: category value -> type alias -> property alias -> type
        """
        self.property_types = property_types

    @classmethod
    def from_snapshot(cls, snapshot: SchemaSnapshot) -> SnapshotPropertyTypeResolver:
        return cls(snapshot.property_types)

    def __call__(self, category: ItemCategory, type_alias: str, property_alias: str) -> Any:
        category_value = getattr(category, "value", category)
        try:
            return self.property_types[category_value][type_alias][property_alias]
        except KeyError:
            raise UnresolvedPropertyTypeError(category, type_alias, property_alias) from None
