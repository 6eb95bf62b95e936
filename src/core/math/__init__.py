"""
Core math modules

Численные примитивы, на которые опираются конвертеры единиц.
"""

from src.core.math.numerical_safeguards import (
    # Precision constants
    IDENTITY_FACTOR,
    SINGLE_PRECISION,
    ZERO_OFFSET,
    # Single precision
    is_single_precision_one,
    is_single_precision_zero,
    to_single_precision,
    # IEEE-754 arithmetic
    safe_exp,
    safe_log,
    safe_reciprocal,
    # Validation
    is_valid_float,
    validate_log_base,
)

__all__ = [
    "IDENTITY_FACTOR",
    "SINGLE_PRECISION",
    "ZERO_OFFSET",
    "to_single_precision",
    "is_single_precision_one",
    "is_single_precision_zero",
    "safe_reciprocal",
    "safe_log",
    "safe_exp",
    "is_valid_float",
    "validate_log_base",
]
