"""
Pipeline - snapshot to type graph.

This module turns a schema snapshot into the linked type models
consumed by source generation:

1. Phase 1 (Parser): Parse the snapshot document into raw nodes
2. Phase 2 (Analyzer): Clean names, resolve property types, link parents and mixins
"""

from __future__ import annotations

from .analyzer import (
    PropertyModel,
    SnapshotPropertyTypeResolver,
    TypeGraphBuilder,
    TypeModel,
    build_type_graph,
)
from .application import ModelsApplication
from .config import BuilderConfig
from .errors import (
    ApplicationNotReadyError,
    CyclicInheritanceError,
    DanglingReferenceError,
    InconsistentBatchError,
    ModelsBuilderError,
    SnapshotFormatError,
    UnresolvedPropertyTypeError,
)
from .schema_ast import (
    ItemCategory,
    RawComposition,
    RawContentType,
    RawPropertyType,
    SchemaSnapshot,
    SnapshotParser,
)

__all__ = [
    "BuilderConfig",
    "ModelsApplication",
    "TypeGraphBuilder",
    "build_type_graph",
    "TypeModel",
    "PropertyModel",
    "SnapshotPropertyTypeResolver",
    "ItemCategory",
    "RawComposition",
    "RawContentType",
    "RawPropertyType",
    "SchemaSnapshot",
    "SnapshotParser",
    "ModelsBuilderError",
    "InconsistentBatchError",
    "CyclicInheritanceError",
    "SnapshotFormatError",
    "DanglingReferenceError",
    "UnresolvedPropertyTypeError",
    "ApplicationNotReadyError",
]
