"""Schema validation of OCPP payloads."""

from ..errors import (
    DuplicateSchema,
    OcppValidateError,
    SchemaParseFailure,
    SchemaViolation,
    UnknownMessageType,
)
from .result import ValidationErrorEntry, ValidationResult
from .engine import Validator, validate

__all__ = [
    "DuplicateSchema",
    "OcppValidateError",
    "SchemaParseFailure",
    "SchemaViolation",
    "UnknownMessageType",
    "ValidationErrorEntry",
    "ValidationResult",
    "Validator",
    "validate",
]
