"""Models Builder

A Python package for building typed content models from a content
management schema snapshot. Resolves type inheritance, compositions
(mixins) and property types into a linked graph ready for source
generation.
"""

__version__ = "1.0.1"

from .pipeline import (
    BuilderConfig,
    DanglingReferenceError,
    InconsistentBatchError,
    ItemCategory,
    ModelsApplication,
    ModelsBuilderError,
    PropertyModel,
    RawComposition,
    RawContentType,
    RawPropertyType,
    SnapshotParser,
    SnapshotPropertyTypeResolver,
    TypeGraphBuilder,
    TypeModel,
    UnresolvedPropertyTypeError,
    build_type_graph,
)
from .utils import to_pascal_case

__all__ = [
    "build_type_graph",
    "TypeGraphBuilder",
    "ModelsApplication",
    "BuilderConfig",
    "TypeModel",
    "PropertyModel",
    "ItemCategory",
    "RawContentType",
    "RawPropertyType",
    "RawComposition",
    "SnapshotParser",
    "SnapshotPropertyTypeResolver",
    "ModelsBuilderError",
    "InconsistentBatchError",
    "DanglingReferenceError",
    "UnresolvedPropertyTypeError",
    "to_pascal_case",
]
