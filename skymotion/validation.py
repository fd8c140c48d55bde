# skymotion/validation.py
"""
Small input guards used by the data models. Each guard returns the value
(as float) so it can be used inline, or raises the given ValidationError
subclass.
"""
import math
from numbers import Real
from typing import Type

from .exceptions import ValidationError

def require_finite(field: str, value, error: Type[ValidationError] = ValidationError) -> float:
    """Rejects non-numeric, NaN and infinite values."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise error(field, value, "Expected a real number")
    if not math.isfinite(value):
        raise error(field, value, "Expected a finite number")
    return float(value)

def require_non_negative(field: str, value, error: Type[ValidationError] = ValidationError) -> float:
    value = require_finite(field, value, error)
    if value < 0:
        raise error(field, value, "Expected a non-negative number")
    return value

def require_positive(field: str, value, error: Type[ValidationError] = ValidationError) -> float:
    value = require_finite(field, value, error)
    if value <= 0:
        raise error(field, value, "Expected a positive number")
    return value

def require_fraction(field: str, value, error: Type[ValidationError] = ValidationError) -> float:
    """Value must lie in the closed interval [0, 1]."""
    value = require_finite(field, value, error)
    if not 0.0 <= value <= 1.0:
        raise error(field, value, "Expected a value between 0 and 1")
    return value
