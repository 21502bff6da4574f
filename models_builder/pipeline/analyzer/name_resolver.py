"""
Name resolver for turning aliases into generation-safe identifiers.

Cleans type and property aliases to PascalCase and keeps track of
aliases that end up with the same name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...utils import to_pascal_case

logger = logging.getLogger(__name__)


@dataclass
class NameMapping:
    """Result of name resolution."""

    # Alias -> PascalCase name
    names: dict[str, str] = field(default_factory=dict)

    # PascalCase name -> aliases that cleaned to it, when more than one did
    collisions: dict[str, list[str]] = field(default_factory=dict)


class NameResolver:
    """Resolves identifiers from aliases, once per alias."""

    def __init__(self):
        self._type_names = NameMapping()
        self._property_names: dict[str, NameMapping] = {}
        self._cache: dict[str, str] = {}

    def clean(self, alias: str) -> str:
        """
        Clean an alias into a PascalCase identifier.

        Args:
            alias: Raw type or property alias

        Returns:
            The cleaned name; always the same for the same alias
        """
        name = self._cache.get(alias)
        if name is None:
            name = to_pascal_case(alias)
            self._cache[alias] = name
        return name

    def type_name(self, alias: str) -> str:
        """Clean a type alias, recording it for collision detection."""
        return self._record(self._type_names, alias, "Type aliases")

    def property_name(self, type_alias: str, alias: str) -> str:
        """Clean a property alias, recording it for collision detection within its type."""
        mapping = self._property_names.setdefault(type_alias, NameMapping())
        return self._record(mapping, alias, f"Property aliases of '{type_alias}'")

    def _record(self, mapping: NameMapping, alias: str, label: str) -> str:
        name = self.clean(alias)
        if alias in mapping.names:
            return name

        for other_alias, other_name in mapping.names.items():
            if other_name == name:
                aliases = mapping.collisions.setdefault(name, [other_alias])
                aliases.append(alias)
                logger.warning(f"{label} {aliases} all clean to the name '{name}'")
                break
        mapping.names[alias] = name
        return name

    def property_collisions(self, type_alias: str) -> dict[str, list[str]]:
        """Get the property names shared by several aliases of a type."""
        mapping = self._property_names.get(type_alias)
        return mapping.collisions if mapping else {}
