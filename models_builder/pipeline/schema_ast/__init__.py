"""
Schema snapshot module.

Contains the raw node definitions and the snapshot parser.
"""

from __future__ import annotations

from .nodes import (
    ItemCategory,
    RawComposition,
    RawContentType,
    RawPropertyType,
    SchemaSnapshot,
)
from .parser import SnapshotParser

__all__ = [
    "ItemCategory",
    "RawComposition",
    "RawContentType",
    "RawPropertyType",
    "SchemaSnapshot",
    "SnapshotParser",
]
