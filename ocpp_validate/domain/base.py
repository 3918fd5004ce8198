"""Base classes and the wire serializer shared by every OCPP payload.

Payload dataclasses use snake_case attribute names.  ``to_tree`` turns an
instance into the JSON-compatible structure the OCPP 1.6 schemas describe:
camelCase keys, ``None`` fields omitted, enums as their string value and
datetimes as UTC ISO 8601 strings.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, Dict

from ocpp.charge_point import remove_nones, snake_to_camel_case


@lru_cache(maxsize=None)
def wire_name(attribute: str) -> str:
    """Convert ``charge_point_model`` to ``chargePointModel``.

    Uses the same rules as the ``ocpp`` library when it builds a call.
    """
    return next(iter(snake_to_camel_case({attribute: None})))


def format_timestamp(value: datetime) -> str:
    """Render ``value`` in UTC with a trailing ``Z``.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def _plain(value: Any) -> Any:
    """Convert leaves to JSON types, keeping attribute names and ``None``."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.metadata.get("wire", f.name): _plain(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def to_tree(value: Any) -> Any:
    """Recursively convert ``value`` to the camelCase wire structure."""
    return snake_to_camel_case(remove_nones(_plain(value)))


class Payload:
    """Capability shared by all messages: an identifier and a wire tree."""

    __slots__ = ()

    suffix: ClassVar[str] = ""

    @classmethod
    def message_type(cls) -> str:
        return cls.__name__

    @classmethod
    def action(cls) -> str:
        name = cls.message_type()
        if cls.suffix and name.endswith(cls.suffix):
            return name[: -len(cls.suffix)]
        return name

    def to_tree(self) -> Dict[str, Any]:
        return to_tree(self)


class Request(Payload):
    """A ``.req`` PDU."""

    __slots__ = ()
    suffix = "Request"


class Response(Payload):
    """A ``.conf`` PDU."""

    __slots__ = ()
    suffix = "Response"
