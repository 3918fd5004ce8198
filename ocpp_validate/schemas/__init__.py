"""Bundled OCPP 1.6 JSON schemas and the registry that serves them."""

from .registry import (
    SchemaDocument,
    SchemaRegistry,
    default_registry,
    reset_default_registry,
)

__all__ = [
    "SchemaDocument",
    "SchemaRegistry",
    "default_registry",
    "reset_default_registry",
]
