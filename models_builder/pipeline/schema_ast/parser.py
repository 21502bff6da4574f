"""
Snapshot parser that builds the raw schema nodes.

Reads the JSON document exported from the platform and turns it into
a SchemaSnapshot, without linking anything.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import SnapshotFormatError
from .nodes import (
    ItemCategory,
    RawComposition,
    RawContentType,
    RawPropertyType,
    SchemaSnapshot,
    to_item_category,
)


class SnapshotParser:
    """Parses a snapshot document into raw nodes."""

    # Top-level keys and the category their entries default to
    CATEGORY_KEYS = {
        "content_types": ItemCategory.CONTENT,
        "media_types": ItemCategory.MEDIA,
    }

    def load(self, path: str | Path) -> SchemaSnapshot:
        """Load and parse a snapshot file."""
        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise SnapshotFormatError(f"Snapshot {path} is not valid JSON: {e}") from e
        return self.parse(document)

    def parse(self, document: dict[str, Any]) -> SchemaSnapshot:
        """
        Parse a snapshot document.

        Args:
            document: The decoded JSON snapshot

        Returns:
            SchemaSnapshot with raw types and their property types
        """
        if not isinstance(document, dict):
            raise SnapshotFormatError("Snapshot must be a JSON object")

        snapshot = SchemaSnapshot()
        for key, default_category in self.CATEGORY_KEYS.items():
            entries = document.get(key) or []
            if not isinstance(entries, list):
                raise SnapshotFormatError(f"'{key}' must be a list")
            for index, entry in enumerate(entries):
                raw_type = self._parse_type(entry, default_category, f"{key}[{index}]")
                snapshot.types.append(raw_type)
                self._collect_property_types(entry, raw_type, snapshot)

        return snapshot

    def _parse_type(self, entry: Any, default_category: ItemCategory, path: str) -> RawContentType:
        """Parse one type entry."""
        if not isinstance(entry, dict):
            raise SnapshotFormatError(f"{path} must be an object")

        type_id = self._require_int(entry, "id", path)
        alias = entry.get("alias")
        if not isinstance(alias, str) or not alias:
            raise SnapshotFormatError(f"{path} has no alias")

        category = to_item_category(entry.get("category", default_category))
        parent_id = entry.get("parent_id", -1)
        if parent_id is None:
            parent_id = -1
        if not isinstance(parent_id, int) or isinstance(parent_id, bool):
            raise SnapshotFormatError(f"{path}.parent_id must be an integer")

        properties = []
        for index, prop in enumerate(self._require_list(entry, "properties", path)):
            prop_path = f"{path}.properties[{index}]"
            if not isinstance(prop, dict) or not isinstance(prop.get("alias"), str):
                raise SnapshotFormatError(f"{prop_path} must be an object with an alias")
            properties.append(RawPropertyType(alias=prop["alias"]))

        compositions = []
        for index, composition_id in enumerate(self._require_list(entry, "compositions", path)):
            if not isinstance(composition_id, int) or isinstance(composition_id, bool):
                raise SnapshotFormatError(f"{path}.compositions[{index}] must be a type id")
            compositions.append(RawComposition(id=composition_id))

        return RawContentType(
            id=type_id,
            alias=alias,
            category=category,
            parent_id=parent_id,
            properties=properties,
            compositions=compositions,
        )

    def _require_int(self, entry: dict[str, Any], key: str, path: str) -> int:
        value = entry.get(key)
        if not isinstance(value, int) or isinstance(value, bool):
            raise SnapshotFormatError(f"{path}.{key} must be an integer")
        return value

    def _require_list(self, entry: dict[str, Any], key: str, path: str) -> list[Any]:
        value = entry.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise SnapshotFormatError(f"{path}.{key} must be a list")
        return value

    def _collect_property_types(self, entry: dict[str, Any], raw_type: RawContentType, snapshot: SchemaSnapshot) -> None:
        """Record the semantic type of each property that declares one."""
        for prop in entry.get("properties") or []:
            if "clr_type" not in prop:
                continue
            by_alias = snapshot.property_types.setdefault(raw_type.category.value, {})
            by_alias.setdefault(raw_type.alias, {})[prop["alias"]] = prop["clr_type"]
