from __future__ import annotations
import sys
from dataclasses import dataclass
import numpy as np

# Fixed-width target of Integer.try_cast_to_fixed_width_integer
INT64_MIN: int = int(np.iinfo(np.int64).min)
INT64_MAX: int = int(np.iinfo(np.int64).max)

# Largest magnitude a float64 holds with an exact integer round-trip (2**53)
FLOAT_EXACT_INT_MAX: int = 2 ** (np.finfo(np.float64).nmant + 1)

# 96-bit magnitude of a scaled decimal, 28 significant digits
DECIMAL_MAX: int = 2 ** 96 - 1
DECIMAL_PRECISION: int = 28

# Exponents above this are not handed to pow() in one go
FAST_POW_EXPONENT_LIMIT: int = sys.maxsize


@dataclass
class SearchConfig:
    """Parameters of the fraction-chain search run by main.py.

    The base set holds every i/j with 1 <= i <= limit and 2 <= j <= i that
    does not exceed max_value. Chains of `length` factors are drawn from it
    and only those whose product is at most max_product are reported.
    """

    limit: int = 7
    max_value: int = 2
    length: int = 3
    max_product: int = 4
    decimals: int = 3
