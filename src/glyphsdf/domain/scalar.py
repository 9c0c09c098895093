"""Scalar precision model.

All arithmetic runs on Python floats. What changes between single and double
precision is the machine epsilon used as the tolerance for every
near-zero test in the root solver and the segment queries.
"""

import sys
from enum import Enum

DOUBLE_EPSILON: float = sys.float_info.epsilon
SINGLE_EPSILON: float = 2.0**-23


class Precision(str, Enum):
    """Scalar precision used for epsilon comparisons."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def epsilon(self) -> float:
        """Machine epsilon of the scalar type."""
        if self is Precision.SINGLE:
            return SINGLE_EPSILON
        return DOUBLE_EPSILON
