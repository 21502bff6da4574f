"""
Analyzer module.

Contains reference resolution, name resolution, and type graph building.
"""

from __future__ import annotations

from .builder import TypeGraphBuilder, build_type_graph
from .ir_nodes import PropertyModel, TypeModel
from .name_resolver import NameMapping, NameResolver
from .property_types import PropertyTypeResolver, SnapshotPropertyTypeResolver
from .reference_resolver import ReferenceResolver

__all__ = [
    "TypeModel",
    "PropertyModel",
    "NameMapping",
    "NameResolver",
    "ReferenceResolver",
    "PropertyTypeResolver",
    "SnapshotPropertyTypeResolver",
    "TypeGraphBuilder",
    "build_type_graph",
]
