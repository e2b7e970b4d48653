# ContFrac SDK - Exceptions
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""Exception hierarchy for ContFrac."""

from __future__ import annotations
from typing import Optional, Any


class ContinuedFractionError(Exception):
    """Base class for all ContFrac exceptions."""
    pass


class DegenerateRational(ContinuedFractionError):
    """Raised when a pair has no rational value (0/0, or a folded x/0)."""

    def __init__(self, numerator: int, denominator: int, message: Optional[str] = None):
        if message is None:
            message = f"Degenerate rational {numerator}/{denominator} has no continued fraction"
        super().__init__(message)
        self.numerator = numerator
        self.denominator = denominator


class IntegerOverflowError(ContinuedFractionError, OverflowError):
    """Raised when a value leaves the configured fixed-width integer domain."""

    def __init__(self, operation: str, value: int, int_type: str):
        super().__init__(
            f"{operation} produced {value}, which does not fit in {int_type}"
        )
        self.operation = operation
        self.value = value
        self.int_type = int_type


class DomainError(ContinuedFractionError, TypeError):
    """Raised when a non-integer is given where an integer is required."""

    def __init__(self, what: str, value: Any, suggestion: Optional[str] = None):
        message = f"{what} must be an integer, got {type(value).__name__}: {value!r}"
        if suggestion is None:
            suggestion = _get_suggestion_for_value(value)
        if suggestion:
            message += f"\n  Suggestion: {suggestion}"
        super().__init__(message)
        self.value = value
        self.suggestion = suggestion


def _get_suggestion_for_value(value: Any) -> Optional[str]:
    """Get a helpful suggestion for a rejected input value."""
    if isinstance(value, bool):
        return "Booleans are not accepted; pass 0 or 1 explicitly."
    if isinstance(value, float):
        return (
            "Floating-point input is not supported. "
            "Use fractions.Fraction(str(x)) to get an exact rational first."
        )
    if isinstance(value, str):
        return "Parse the string first, e.g. fractions.Fraction('22/7')."
    return None
