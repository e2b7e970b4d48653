# ContFrac SDK - Rational Number Utilities
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""
Utilities for exact rational pairs.

A rational number travels through the engine as a plain (p, q) pair of
integers. This module converts user-facing values into such pairs and
brings them to the canonical form the expansion expects.

The Problem:
    >>> from fractions import Fraction
    >>> Fraction(0.1)
    Fraction(3602879701896397, 36028797018963968)  # Binary representation!

Floats are therefore rejected outright; build a Fraction from a string:
    >>> from contfrac.rational import as_pair
    >>> as_pair(Fraction('0.1'))
    (1, 10)
"""

from __future__ import annotations
import numbers
from fractions import Fraction
from typing import Union, Tuple, TYPE_CHECKING

from .arith import gcd
from .exceptions import DegenerateRational, DomainError

if TYPE_CHECKING:
    from .arith import IntDomain


# Things that describe an exact rational value
RationalLike = Union[int, Fraction, Tuple[int, int]]


def as_pair(value: RationalLike) -> tuple[int, int]:
    """
    Convert an exact rational value to a raw (p, q) integer pair.

    No reduction or sign normalization is applied here.

    Args:
        value: An int, a Fraction, or a (p, q) tuple of ints.

    Returns:
        The (p, q) pair.

    Raises:
        DomainError: For floats and other inexact or non-numeric values.

    Examples:
        >>> as_pair(3)
        (3, 1)
        >>> as_pair(Fraction(6, -4))
        (-3, 2)
        >>> as_pair((6, -4))
        (6, -4)
    """
    if isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"Rational pair must have 2 elements, got {len(value)}")
        p, q = value
        return _as_int(p, "numerator"), _as_int(q, "denominator")
    elif isinstance(value, Fraction):
        return value.numerator, value.denominator
    else:
        return _as_int(value, "value"), 1


def _as_int(x, what: str) -> int:
    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        raise DomainError(what, x)
    return int(x)


def normalize(p: int, q: int, domain: IntDomain) -> tuple[int, int]:
    """
    Reduce p/q to lowest terms with a non-negative denominator.

    A zero denominator with a non-zero numerator reduces to (1, 0) or
    (-1, 0); the expansion of such a pair is empty.

    Raises:
        DegenerateRational: If both p and q are zero.
        IntegerOverflowError: If an intermediate value leaves the domain
            under checked arithmetic (e.g. abs of the minimum value).
    """
    d = domain.narrow(gcd(domain.abs(p), domain.abs(q)), "gcd")
    if d == 0:
        raise DegenerateRational(p, q)

    p, _ = domain.divmod_trunc(p, d)
    q, _ = domain.divmod_trunc(q, d)

    if q < 0:
        p = domain.neg(p)
        q = domain.neg(q)

    return p, q


def cross_equal(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """
    Check two pairs for cross-multiplication equality: p1 * q2 == p2 * q1.

    Uses exact Python integers, so it never overflows.

    Examples:
        >>> cross_equal((22, 7), (-44, -14))
        True
    """
    (p1, q1), (p2, q2) = a, b
    return p1 * q2 == p2 * q1
