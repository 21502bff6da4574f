"""
Configuration for the type graph builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .schema_ast.nodes import ItemCategory


@dataclass
class BuilderConfig:
    """Configuration options for building the type graph."""

    # Fail on cyclic parent chains instead of trusting the snapshot
    detect_cycles: bool = True

    # Property aliases to ignore globally across all types
    ignore_properties: list[str] = field(default_factory=list)

    # Item categories built when none is requested explicitly
    categories: list[str] = field(default_factory=lambda: ["content", "media"])

    @staticmethod
    def from_dict(d: dict) -> BuilderConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        if not isinstance(d, dict):
            raise ValueError(f"Config must be an object, got {type(d).__name__}")

        config = BuilderConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.validate()
        return config

    def validate(self) -> None:
        """Check option types; raises ValueError on the first bad option."""
        if not isinstance(self.detect_cycles, bool):
            raise ValueError("detect_cycles must be true or false")
        for key in ("ignore_properties", "categories"):
            value = getattr(self, key)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ValueError(f"{key} must be a list of strings")

        known = [category.value for category in ItemCategory]
        for category in self.categories:
            if category not in known:
                raise ValueError(f"Unknown category {category!r} in categories, expected one of {known}")

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "detect_cycles": self.detect_cycles,
            "ignore_properties": self.ignore_properties,
            "categories": self.categories,
        }
