"""
Application facade over a schema snapshot.

Owns the snapshot for its lifetime and builds the type graphs the
generator asks for. The caller creates, starts and terminates it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .analyzer.builder import TypeGraphBuilder
from .analyzer.ir_nodes import TypeModel
from .analyzer.property_types import SnapshotPropertyTypeResolver
from .config import BuilderConfig
from .errors import ApplicationNotReadyError
from .schema_ast.nodes import ItemCategory, SchemaSnapshot, to_item_category
from .schema_ast.parser import SnapshotParser

logger = logging.getLogger(__name__)


class ModelsApplication:
    """Builds content and media type models from a loaded snapshot."""

    def __init__(self, loader: Callable[[], SchemaSnapshot], config: BuilderConfig | None = None):
        """
        Initialize the application.

        Args:
            loader: Returns the schema snapshot; called once by start()
            config: Builder configuration
        """
        self.loader = loader
        self.config = config or BuilderConfig()
        self._snapshot: SchemaSnapshot | None = None

    @classmethod
    def from_file(cls, path: str | Path, config: BuilderConfig | None = None) -> ModelsApplication:
        """Create an application reading its snapshot from a JSON file."""
        return cls(lambda: SnapshotParser().load(path), config)

    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None

    def start(self) -> ModelsApplication:
        if self._snapshot is None:
            self._snapshot = self.loader()
            logger.info(f"Loaded snapshot with {len(self._snapshot.types)} types")
        return self

    def terminate(self) -> None:
        self._snapshot = None

    def __enter__(self) -> ModelsApplication:
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.terminate()

    def get_content_types(self) -> list[TypeModel]:
        return self.get_types(ItemCategory.CONTENT)

    def get_media_types(self) -> list[TypeModel]:
        return self.get_types(ItemCategory.MEDIA)

    def get_content_and_media_types(self) -> list[TypeModel]:
        """Build both categories; each one is built on its own."""
        types = self.get_content_types()
        types.extend(self.get_media_types())
        return types

    def get_types(self, category: ItemCategory | str) -> list[TypeModel]:
        """
        Build the type graph of one category.

        Args:
            category: "content" or "media"

        Returns:
            Linked TypeModel nodes in snapshot order
        """
        if self._snapshot is None:
            raise ApplicationNotReadyError("Application is not ready.")

        builder = TypeGraphBuilder(self.config)
        category = to_item_category(category)
        resolver = SnapshotPropertyTypeResolver.from_snapshot(self._snapshot)
        return builder.build(category, self._snapshot.get_types(category), resolver)
