"""Value types returned by :class:`~ocpp_validate.validation.engine.Validator`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from ..errors import SchemaViolation


@dataclass(frozen=True, slots=True)
class ValidationErrorEntry:
    """A single rule violation.

    ``path`` is a JSON pointer built from wire field names, ``"/"`` for the
    payload root.  ``keyword`` names the schema rule that failed and
    ``value`` is the offending value (``None`` for a missing property).
    """

    path: str
    description: str
    keyword: str
    value: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.description} at {self.path}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one message.

    A result is either a success with no entries or a failure carrying every
    violation found.  There is no partial success.
    """

    message_type: str
    entries: Tuple[ValidationErrorEntry, ...] = ()

    @classmethod
    def success(cls, message_type: str) -> "ValidationResult":
        return cls(message_type)

    @classmethod
    def failure(cls, message_type: str, entries) -> "ValidationResult":
        entries = tuple(entries)
        if not entries:
            raise ValueError("a failed result needs at least one entry")
        return cls(message_type, entries)

    @property
    def is_valid(self) -> bool:
        return not self.entries

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(entry.path for entry in self.entries)

    def render(self) -> str:
        """Return all entry descriptions, one per line."""
        return "\n".join(str(entry) for entry in self.entries)

    def raise_for_violations(self) -> None:
        """Raise :class:`SchemaViolation` if this result is a failure."""
        if self.entries:
            raise SchemaViolation(self.message_type, self.entries)

    def __str__(self) -> str:
        if self.is_valid:
            return f"{self.message_type}: valid"
        return self.render()
