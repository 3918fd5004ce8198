"""Validate OCPP payloads against their registered JSON schemas."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Tuple, TypeVar

from ..schemas.registry import SchemaRegistry, default_registry
from .report import build_entries
from .result import ValidationResult

logger = logging.getLogger(__name__)

M = TypeVar("M")


def _decimalize(value: Any, path: Tuple[Any, ...], non_finite: List) -> Any:
    """Copy ``value`` with floats as Decimal so ``multipleOf`` stays exact.

    Infinity and NaN have no JSON form.  Their paths are appended to
    ``non_finite`` and a zero stands in for them.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            non_finite.append((path, value))
            return Decimal(0)
        return Decimal(repr(value))
    if isinstance(value, Mapping):
        return {
            key: _decimalize(item, path + (key,), non_finite)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [
            _decimalize(item, path + (index,), non_finite)
            for index, item in enumerate(value)
        ]
    return value


class Validator:
    """Check payloads against the schemas held by a :class:`SchemaRegistry`.

    Works with any object that has a ``message_type()`` classmethod and a
    ``to_tree()`` method, which every :class:`~ocpp_validate.domain.Payload`
    provides.  Validation is read-only and keeps no state between calls.
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def validate(self, message) -> ValidationResult:
        """Serialize ``message`` and report every schema violation."""
        message_type = message.message_type()
        # Resolve first so an unknown type fails before serialization.
        self.registry.lookup(message_type)
        return self.validate_payload(message_type, message.to_tree())

    def validate_payload(self, message_type: str, payload: Any) -> ValidationResult:
        """Validate an already serialized wire payload."""
        document = self.registry.lookup(message_type)
        non_finite: List[Tuple[Tuple[Any, ...], float]] = []
        instance = _decimalize(payload, (), non_finite)
        errors = document.validator.iter_errors(instance)
        entries = build_entries(errors, document, non_finite)
        if not entries:
            logger.debug(f"{message_type} passed validation")
            return ValidationResult.success(message_type)
        logger.warning(
            f"{message_type} failed validation with {len(entries)} error(s): "
            + "; ".join(str(entry) for entry in entries)
        )
        return ValidationResult.failure(message_type, entries)

    def ensure_valid(self, message: M) -> M:
        """Return ``message`` unchanged or raise :class:`SchemaViolation`."""
        self.validate(message).raise_for_violations()
        return message


def validate(message) -> ValidationResult:
    """Validate ``message`` against the process-wide default registry."""
    return Validator(default_registry()).validate(message)
