"""
Reference resolver for parent and composition ids.

Resolves type ids to the single TypeModel built for them in the
current batch.
"""

from __future__ import annotations

from ..errors import DanglingReferenceError, InconsistentBatchError
from .ir_nodes import TypeModel


class ReferenceResolver:
    """Resolves type ids to nodes of the batch being built."""

    def __init__(self):
        self._by_id: dict[int, TypeModel] = {}

    def register(self, type_model: TypeModel) -> None:
        """Register a freshly built node under its id."""
        existing = self._by_id.get(type_model.id)
        if existing is not None:
            raise InconsistentBatchError(f"Types '{existing.alias}' and '{type_model.alias}' share the id {type_model.id}")
        self._by_id[type_model.id] = type_model

    def resolve(self, owner: TypeModel, reference_id: int, relation: str) -> TypeModel:
        """
        Resolve an id referenced by a node.

        Args:
            owner: The node holding the reference
            reference_id: The referenced type id
            relation: "parent" or "composition", for error messages

        Returns:
            The referenced node
        """
        target = self._by_id.get(reference_id)
        if target is None:
            raise DanglingReferenceError(owner.id, owner.alias, reference_id, relation)
        return target
