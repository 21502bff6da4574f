"""
Type graph builder.

Turns a flat batch of raw types into linked TypeModel nodes: parents
are resolved, compositions other than the parent become mixins, and
mixin marking is carried up each mixin's parent chain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import BuilderConfig
from ..errors import (
    CyclicInheritanceError,
    InconsistentBatchError,
    UnresolvedPropertyTypeError,
)
from ..schema_ast.nodes import ItemCategory, RawContentType, to_item_category
from .ir_nodes import PropertyModel, TypeModel
from .name_resolver import NameResolver
from .property_types import PropertyTypeResolver
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


class TypeGraphBuilder:
    """Builds the type graph of one item category."""

    def __init__(self, config: BuilderConfig | None = None):
        """
        Initialize the builder.

        Args:
            config: Builder configuration
        """
        self.config = config or BuilderConfig()

        # Will be set during build
        self.category: ItemCategory | None = None
        self.resolver: PropertyTypeResolver | None = None
        self.name_resolver: NameResolver | None = None
        self.references: ReferenceResolver | None = None

    def build(
        self,
        category: ItemCategory | str,
        raw_types: Iterable[RawContentType],
        resolver: PropertyTypeResolver,
    ) -> list[TypeModel]:
        """
        Build the type graph.

        Args:
            category: Item category every raw type must belong to
            raw_types: The raw type definitions, parents and compositions included
            resolver: Returns the semantic type of a (category, type alias, property alias)

        Returns:
            TypeModel nodes in input order, fully linked
        """
        self.category = to_item_category(category)
        self.resolver = resolver
        self.name_resolver = NameResolver()
        self.references = ReferenceResolver()
        raw_types = list(raw_types)

        # Every pass runs over the whole batch before the next one starts
        type_models = [self._build_node(raw_type) for raw_type in raw_types]
        logger.debug(f"Built {len(type_models)} {self.category.value} type nodes")

        self._link_base_types(type_models)
        if self.config.detect_cycles:
            self._check_cycles(type_models)

        mixin_count = 0
        for raw_type, type_model in zip(raw_types, type_models):
            mixin_count += self._link_mixins(raw_type, type_model)
        logger.debug(f"Linked {mixin_count} mixin relations, {sum(t.is_mixin for t in type_models)} types are mixins")

        return type_models

    def _build_node(self, raw_type: RawContentType) -> TypeModel:
        """First pass: create the node and its properties."""
        if raw_type.category != self.category:
            found = getattr(raw_type.category, "value", raw_type.category)
            raise InconsistentBatchError(f"Type '{raw_type.alias}' (id {raw_type.id}) is a {found} type, expected {self.category.value}")

        name = self.name_resolver.type_name(raw_type.alias)
        if not name:
            raise InconsistentBatchError(f"Type alias '{raw_type.alias}' (id {raw_type.id}) does not yield a valid name")

        type_model = TypeModel(
            id=raw_type.id,
            alias=raw_type.alias,
            name=name,
            item_category=self.category,
            base_type_id=raw_type.parent_id,
        )
        self.references.register(type_model)

        for raw_property in raw_type.properties:
            if raw_property.alias in self.config.ignore_properties:
                continue
            type_model.properties.append(self._build_property(raw_type, raw_property.alias))

        return type_model

    def _build_property(self, raw_type: RawContentType, alias: str) -> PropertyModel:
        name = self.name_resolver.property_name(raw_type.alias, alias)
        if not name:
            raise InconsistentBatchError(f"Property alias '{alias}' on type '{raw_type.alias}' does not yield a valid name")

        try:
            clr_type = self.resolver(self.category, raw_type.alias, alias)
        except UnresolvedPropertyTypeError:
            raise
        except LookupError as e:
            raise UnresolvedPropertyTypeError(self.category, raw_type.alias, alias) from e
        if clr_type is None:
            raise UnresolvedPropertyTypeError(self.category, raw_type.alias, alias)

        return PropertyModel(alias=alias, name=name, clr_type=clr_type)

    def _link_base_types(self, type_models: list[TypeModel]) -> None:
        """Second pass: wire each node to its parent."""
        for type_model in type_models:
            if type_model.has_base_type:
                type_model.base_type = self.references.resolve(type_model, type_model.base_type_id, "parent")

    def _check_cycles(self, type_models: list[TypeModel]) -> None:
        """Fail if any parent chain loops back on itself."""
        acyclic: set[int] = set()
        for type_model in type_models:
            chain: list[int] = []
            current = type_model
            while current is not None and current.id not in acyclic:
                if current.id in chain:
                    raise CyclicInheritanceError(chain[chain.index(current.id) :] + [current.id])
                chain.append(current.id)
                current = current.base_type
            acyclic.update(chain)

    def _link_mixins(self, raw_type: RawContentType, type_model: TypeModel) -> int:
        """Third pass: every composition that is not the parent is a mixin."""
        count = 0
        for composition in raw_type.compositions:
            composition_model = self.references.resolve(type_model, composition.id, "composition")
            if composition.id == raw_type.parent_id:
                continue

            type_model.mixin_types.append(composition_model)
            self._mark_mixin(composition_model)
            count += 1
        return count

    def _mark_mixin(self, type_model: TypeModel) -> None:
        """Mark a node as mixin, as well as its parents."""
        current = type_model
        # Anything already marked had its parents marked at the same time
        while current is not None and not current.is_mixin:
            current.is_mixin = True
            current = current.base_type


def build_type_graph(
    category: ItemCategory | str,
    raw_types: Iterable[RawContentType],
    resolver: PropertyTypeResolver,
    config: BuilderConfig | None = None,
) -> list[TypeModel]:
    """Build the linked type graph of one item category."""
    return TypeGraphBuilder(config).build(category, raw_types, resolver)
