"""
Errors raised while building the type graph.

Every error is fatal to the build call that raised it: no partial
graph is ever returned to the caller.
"""

from __future__ import annotations

from typing import Any


class ModelsBuilderError(Exception):
    """Base class for all models builder errors."""

    pass


class InconsistentBatchError(ModelsBuilderError):
    """Raised when a batch of raw types cannot form a graph.

    This can happen when:
    - A raw type belongs to another item category than the one requested
    - The requested category is unknown
    - Two raw types share the same id
    - An alias cleans to an empty identifier
    """

    pass


class CyclicInheritanceError(InconsistentBatchError):
    """Raised when following parent links leads back to a type already visited."""

    def __init__(self, cycle: list[int]):
        self.cycle = cycle
        path = " -> ".join(str(type_id) for type_id in cycle)
        super().__init__(f"Cyclic parent chain: {path}")


class SnapshotFormatError(InconsistentBatchError):
    """Raised when a snapshot document does not have the expected shape."""

    pass


class DanglingReferenceError(ModelsBuilderError):
    """Raised when a parent or composition id is not part of the batch.

    Usually means the batch was not category-closed, e.g. a content type
    inherits from a type that was not fetched along with it.
    """

    def __init__(self, type_id: int, alias: str, reference_id: int, relation: str):
        self.type_id = type_id
        self.alias = alias
        self.reference_id = reference_id
        self.relation = relation
        super().__init__(f"Type '{alias}' (id {type_id}) references {relation} id {reference_id} which is not in the batch")


class UnresolvedPropertyTypeError(ModelsBuilderError):
    """Raised when no semantic type can be found for a declared property."""

    def __init__(self, category: Any, type_alias: str, property_alias: str):
        self.category = category
        self.type_alias = type_alias
        self.property_alias = property_alias
        category_value = getattr(category, "value", category)
        super().__init__(f"Cannot resolve type of property '{property_alias}' on {category_value} type '{type_alias}'")


class ApplicationNotReadyError(ModelsBuilderError):
    """Raised when types are requested from an application that was not started."""

    pass
