"""Registry of OCPP 1.6 JSON schemas keyed by message type.

Bundled schemas live in ``ocpp_validate/schemas/json`` as
``<MessageType>.json``.  They are parsed lazily on first lookup, at most once
per registry, and shared read-only afterwards.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from jsonschema import Draft4Validator, FormatChecker
from jsonschema.exceptions import SchemaError

from ..config import get_settings
from ..errors import DuplicateSchema, SchemaParseFailure, UnknownMessageType

logger = logging.getLogger(__name__)

SCHEMA_PACKAGE = "ocpp_validate.schemas"
SCHEMA_DIR = "json"


@dataclass(frozen=True, eq=False)
class SchemaDocument:
    """A parsed schema together with its compiled validator."""

    message_type: str
    schema: Mapping[str, Any]
    validator: Draft4Validator

    def property_order(self, path) -> tuple:
        """Sort key for ``path`` following the schema's declaration order.

        Object keys rank by their position in ``properties``; keys the schema
        does not declare rank after the declared ones.  Array indices rank
        numerically.
        """
        node: Mapping[str, Any] = self.schema
        key = []
        for part in path:
            if isinstance(part, int):
                key.append((0, part))
                items = node.get("items", {})
                node = items if isinstance(items, Mapping) else {}
                continue
            properties = node.get("properties", {})
            if part in properties:
                key.append((0, list(properties).index(part)))
                node = properties[part]
            else:
                key.append((1, str(part)))
                node = {}
        return tuple(key)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"{type(value).__name__} is not a JSON type")


def _parse(message_type: str, source: Union[str, bytes, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(source, Mapping):
        # Round trip through JSON so numbers are held as Decimal like bundled files.
        try:
            source = json.dumps(dict(source), default=_jsonable)
        except (TypeError, ValueError) as exc:
            raise SchemaParseFailure(message_type, f"not JSON serializable ({exc})") from exc
    try:
        schema = json.loads(source, parse_float=Decimal)
    except ValueError as exc:
        raise SchemaParseFailure(message_type, f"not valid JSON ({exc})") from exc
    if not isinstance(schema, dict):
        raise SchemaParseFailure(message_type, "top level must be a JSON object")
    try:
        Draft4Validator.check_schema(schema)
    except SchemaError as exc:
        raise SchemaParseFailure(message_type, exc.message) from exc
    return schema


class SchemaRegistry:
    """Hold one :class:`SchemaDocument` per message type identifier.

    ``register`` never overwrites: registering an identifier that is already
    known, bundled or not, raises :class:`DuplicateSchema`.
    """

    def __init__(self, *, bundled: bool = True, check_formats: bool = True) -> None:
        self._format_checker = FormatChecker() if check_formats else None
        self._documents: Dict[str, SchemaDocument] = {}
        self._bundled: Dict[str, Any] = self._discover() if bundled else {}
        self._explicit: set = set()
        self._guard = threading.Lock()
        self._key_locks: Dict[str, threading.Lock] = {}

    @classmethod
    def from_settings(cls, settings) -> "SchemaRegistry":
        registry = cls(check_formats=settings.check_formats)
        if settings.eager_load:
            registry.preload()
        return registry

    @staticmethod
    def _discover() -> Dict[str, Any]:
        root = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_DIR)
        found = {}
        for entry in root.iterdir():
            if entry.name.endswith(".json"):
                found[entry.name[: -len(".json")]] = entry
        return found

    def __contains__(self, message_type: object) -> bool:
        return message_type in self._bundled or message_type in self._explicit

    def __len__(self) -> int:
        return len(set(self._bundled) | self._explicit)

    def __iter__(self) -> Iterator[str]:
        return iter(self.message_types())

    def message_types(self) -> List[str]:
        return sorted(set(self._bundled) | self._explicit)

    def register(
        self, message_type: str, document: Union[str, bytes, Mapping[str, Any]]
    ) -> SchemaDocument:
        """Parse ``document`` and store it under ``message_type``."""
        schema = _parse(message_type, document)
        with self._guard:
            if message_type in self:
                raise DuplicateSchema(message_type)
            compiled = self._compile(message_type, schema)
            self._documents[message_type] = compiled
            self._explicit.add(message_type)
        logger.info(f"Registered schema for {message_type}")
        return compiled

    def lookup(self, message_type: str) -> SchemaDocument:
        """Return the parsed schema for ``message_type``."""
        document = self._documents.get(message_type)
        if document is not None:
            return document
        if message_type not in self._bundled:
            raise UnknownMessageType(message_type)
        with self._lock_for(message_type):
            document = self._documents.get(message_type)
            if document is None:
                document = self._load_bundled(message_type)
                self._documents[message_type] = document
        return document

    def preload(self) -> None:
        """Parse every bundled schema now instead of on first lookup."""
        for message_type in sorted(self._bundled):
            self.lookup(message_type)
        logger.info(f"Preloaded {len(self._bundled)} bundled schemas")

    def is_loaded(self, message_type: str) -> bool:
        return message_type in self._documents

    def _lock_for(self, message_type: str) -> threading.Lock:
        with self._guard:
            return self._key_locks.setdefault(message_type, threading.Lock())

    def _load_bundled(self, message_type: str) -> SchemaDocument:
        text = self._bundled[message_type].read_text(encoding="utf-8")
        schema = _parse(message_type, text)
        logger.info(f"Loaded bundled schema for {message_type}")
        return self._compile(message_type, schema)

    def _compile(self, message_type: str, schema: Dict[str, Any]) -> SchemaDocument:
        validator = Draft4Validator(schema, format_checker=self._format_checker)
        return SchemaDocument(message_type, MappingProxyType(schema), validator)


_default: Optional[SchemaRegistry] = None
_default_guard = threading.Lock()


def default_registry() -> SchemaRegistry:
    """Return the process-wide registry, building it on first call."""
    global _default
    if _default is None:
        with _default_guard:
            if _default is None:
                _default = SchemaRegistry.from_settings(get_settings())
    return _default


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next call builds a new one."""
    global _default
    with _default_guard:
        _default = None
