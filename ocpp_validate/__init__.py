"""OCPP 1.6 message models and JSON schema validation."""

from .config import ValidatorSettings, configure_logging, get_settings
from .schemas import (
    SchemaDocument,
    SchemaRegistry,
    default_registry,
    reset_default_registry,
)
from .validation import (
    DuplicateSchema,
    OcppValidateError,
    SchemaParseFailure,
    SchemaViolation,
    UnknownMessageType,
    ValidationErrorEntry,
    ValidationResult,
    Validator,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "DuplicateSchema",
    "OcppValidateError",
    "SchemaDocument",
    "SchemaParseFailure",
    "SchemaRegistry",
    "SchemaViolation",
    "UnknownMessageType",
    "ValidationErrorEntry",
    "ValidationResult",
    "Validator",
    "ValidatorSettings",
    "configure_logging",
    "default_registry",
    "get_settings",
    "reset_default_registry",
    "validate",
]
