"""Exceptions raised by the schema registry and the validation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .validation.result import ValidationErrorEntry


class OcppValidateError(Exception):
    """Base class for every error raised by this package."""


class UnknownMessageType(OcppValidateError, LookupError):
    """No schema is registered or bundled for a message type."""

    def __init__(self, message_type: str) -> None:
        super().__init__(f"no schema registered for message type {message_type!r}")
        self.message_type = message_type


class DuplicateSchema(OcppValidateError):
    """A schema was registered for a message type that already has one."""

    def __init__(self, message_type: str) -> None:
        super().__init__(f"a schema is already registered for {message_type!r}")
        self.message_type = message_type


class SchemaParseFailure(OcppValidateError):
    """A schema document is not valid JSON or not a valid Draft 4 schema."""

    def __init__(self, message_type: str, reason: str) -> None:
        super().__init__(f"invalid schema for {message_type!r}: {reason}")
        self.message_type = message_type
        self.reason = reason


class SchemaViolation(OcppValidateError, ValueError):
    """A payload does not conform to its schema.

    ``entries`` holds every violation found, in traversal order.
    """

    def __init__(
        self, message_type: str, entries: Sequence["ValidationErrorEntry"]
    ) -> None:
        self.message_type = message_type
        self.entries = tuple(entries)
        lines = "\n".join(str(entry) for entry in self.entries)
        super().__init__(
            f"{message_type} failed validation with {len(self.entries)} error(s):\n{lines}"
        )
