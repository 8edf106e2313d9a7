"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Boundary literals and sample values
- factories: Random operand generation and int reference arithmetic
"""

from tests.helpers.constants import (
    MAX_DIGIT_LITERAL,
    OVER_MAX_DIGIT_LITERAL,
    SAMPLE_VALUES,
)
from tests.helpers.factories import (
    from_limbs,
    random_int,
    random_pairs,
    to_limbs,
    trunc_div,
    trunc_mod,
)

__all__ = [
    # Constants
    "MAX_DIGIT_LITERAL",
    "OVER_MAX_DIGIT_LITERAL",
    "SAMPLE_VALUES",
    # Factories
    "from_limbs",
    "random_int",
    "random_pairs",
    "to_limbs",
    "trunc_div",
    "trunc_mod",
]
