from .function_validator import (
    FunctionValidator,
    ValidationResult,
    validate_function,
)

__all__ = ["FunctionValidator", "ValidationResult", "validate_function"]
