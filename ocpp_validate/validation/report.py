"""Translate jsonschema errors into :class:`ValidationErrorEntry` records."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, List, Sequence, Tuple

from jsonschema.exceptions import ValidationError

from .result import ValidationErrorEntry

_JSON_TYPES = (
    (bool, "boolean"),
    (int, "integer"),
    ((float, Decimal), "number"),
    (str, "string"),
    ((list, tuple), "array"),
    (dict, "object"),
    (type(None), "null"),
)


def json_pointer(parts: Sequence[Any]) -> str:
    if not parts:
        return "/"
    escaped = (str(part).replace("~", "~0").replace("/", "~1") for part in parts)
    return "/" + "/".join(escaped)


def json_type(value: Any) -> str:
    for types, name in _JSON_TYPES:
        if isinstance(value, types):
            return name
    return type(value).__name__


def _plain(value: Any) -> Any:
    return float(value) if isinstance(value, Decimal) else value


def _show(value: Any) -> str:
    if isinstance(value, str):
        text = value if len(value) <= 40 else value[:37] + "..."
        return f'"{text}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _describe(error: ValidationError) -> str:
    keyword = error.validator
    limit = error.validator_value
    instance = error.instance

    if keyword == "maxLength":
        return f"string length {len(instance)} exceeds maximum {limit}"
    if keyword == "minLength":
        return f"string length {len(instance)} is below minimum {limit}"
    if keyword == "maxItems":
        return f"array length {len(instance)} exceeds maximum {limit}"
    if keyword == "minItems":
        return f"array length {len(instance)} is below minimum {limit}"
    if keyword == "maximum":
        if error.schema.get("exclusiveMaximum"):
            return f"value {_show(instance)} must be less than {limit}"
        return f"value {_show(instance)} exceeds maximum {limit}"
    if keyword == "minimum":
        if error.schema.get("exclusiveMinimum"):
            return f"value {_show(instance)} must be greater than {limit}"
        return f"value {_show(instance)} is below minimum {limit}"
    if keyword == "multipleOf":
        return f"value {_show(instance)} is not a multiple of {limit}"
    if keyword == "type":
        expected = limit if isinstance(limit, str) else " or ".join(limit)
        if isinstance(instance, (dict, list)):
            return f"expected {expected} but got {json_type(instance)}"
        return f"expected {expected} but got {json_type(instance)} {_show(instance)}"
    if keyword == "enum":
        allowed = ", ".join(str(item) for item in limit)
        return f"value {_show(instance)} is not one of: {allowed}"
    if keyword == "format":
        return f"value {_show(instance)} is not a valid {limit}"
    if keyword == "pattern":
        return f"value {_show(instance)} does not match pattern {limit}"
    return error.message


def _expand(error: ValidationError) -> List[Tuple[Tuple[Any, ...], ValidationErrorEntry]]:
    """Split one jsonschema error into one entry per offending property."""
    path = tuple(error.absolute_path)

    if error.validator == "required":
        return [
            (
                path + (name,),
                ValidationErrorEntry(
                    json_pointer(path + (name,)),
                    f'required property "{name}" is missing',
                    "required",
                ),
            )
            for name in error.validator_value
            if name not in error.instance
        ]

    if error.validator == "additionalProperties" and error.validator_value is False:
        declared = error.schema.get("properties", {})
        return [
            (
                path + (name,),
                ValidationErrorEntry(
                    json_pointer(path + (name,)),
                    f'property "{name}" is not allowed',
                    "additionalProperties",
                    _plain(value),
                ),
            )
            for name, value in error.instance.items()
            if name not in declared
        ]

    entry = ValidationErrorEntry(
        json_pointer(path), _describe(error), str(error.validator), _plain(error.instance)
    )
    return [(path, entry)]


def build_entries(
    errors: Iterable[ValidationError],
    document,
    non_finite: Iterable[Tuple[Tuple[Any, ...], float]] = (),
) -> List[ValidationErrorEntry]:
    """Return entries ordered depth-first in schema declaration order.

    Each offending value yields one entry.  A value of the wrong type is
    reported only for its type, and a non-finite number only as such.
    """
    errors = list(errors)
    mistyped = {tuple(error.absolute_path) for error in errors if error.validator == "type"}
    collected = []
    skipped = set()
    for path, value in non_finite:
        path = tuple(path)
        skipped.add(path)
        entry = ValidationErrorEntry(
            json_pointer(path), f"value {_show(value)} is not a finite number", "type", value
        )
        collected.append((path, entry))
    seen_required = set()
    for error in errors:
        path = tuple(error.absolute_path)
        if path in skipped:
            continue
        if path in mistyped and error.validator != "type":
            continue
        if error.validator == "required":
            # jsonschema reports each missing property separately; _expand
            # already emits all of them for this object.
            if path in seen_required:
                continue
            seen_required.add(path)
        collected.extend(_expand(error))
    collected.sort(key=lambda item: document.property_order(item[0]))
    return [entry for _, entry in collected]
