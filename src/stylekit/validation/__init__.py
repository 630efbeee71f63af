from stylekit.validation.validator import (
    ValidationError,
    validate,
    validate_module,
    validate_module_or_raise,
    validate_or_raise,
)

__all__ = [
    "ValidationError",
    "validate",
    "validate_module",
    "validate_module_or_raise",
    "validate_or_raise",
]
