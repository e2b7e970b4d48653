# ContFrac SDK
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""
ContFrac Python SDK - Continued Fractions of Rational Numbers.

This SDK expands exact rationals p/q into their finite simple continued
fractions, folds them back losslessly, and computes convergents and best
rational approximations, all inside a configurable fixed-width integer
domain.

Example:
    >>> import contfrac as cf
    >>> x = cf.ContinuedFraction.from_rational(22, 7)
    >>> x.coefficients()
    (3, 7)
    >>> x.convergents()
    [Convergent(h=3, k=1), Convergent(h=22, k=7)]
    >>> x.to_rational()
    (22, 7)

Key Features:
    - Euclidean expansion with truncating division semantics
    - Checked or wrapping fixed-width arithmetic (int8 to int64)
    - Convergents as tuples or numpy arrays
    - Best approximation under a denominator bound
"""

__version__ = "0.1.0"

# Integer primitives
from .arith import gcd, IntDomain

# Configuration
from .config import Config, OverflowMode, DEFAULT_CONFIG

# Rational utilities
from .rational import as_pair, normalize, cross_equal

# Engine
from .continued_fraction import (
    ContinuedFraction,
    Convergent,
    expand,
    fold,
    convergents_of,
)

# Exceptions
from .exceptions import (
    ContinuedFractionError,
    DegenerateRational,
    IntegerOverflowError,
    DomainError,
)

__all__ = [
    # Version
    "__version__",
    # Integer primitives
    "gcd",
    "IntDomain",
    # Configuration
    "Config",
    "OverflowMode",
    "DEFAULT_CONFIG",
    # Rational utilities
    "as_pair",
    "normalize",
    "cross_equal",
    # Engine
    "ContinuedFraction",
    "Convergent",
    "expand",
    "fold",
    "convergents_of",
    # Exceptions
    "ContinuedFractionError",
    "DegenerateRational",
    "IntegerOverflowError",
    "DomainError",
]
