# ContFrac SDK - Integer Arithmetic
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""
Integer primitives for the continued fraction engine.

All engine arithmetic runs in a fixed-width signed integer domain
(int32 unless configured otherwise). Python integers never overflow,
so every operation here computes the exact result and then narrows it
back into the domain according to the configured OverflowMode.

Example:
    >>> from contfrac.arith import IntDomain, gcd
    >>> gcd(48, 18)
    6
    >>> d = IntDomain()
    >>> d.divmod_trunc(-7, 2)
    (-3, -1)
"""

from __future__ import annotations
import logging
import numbers
from typing import Any, Optional

from .config import Config, OverflowMode, DEFAULT_CONFIG
from .exceptions import DomainError, IntegerOverflowError


logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of |a| and |b|.

    The result is non-negative and is zero only when both inputs are zero.

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(5, 0)
        5
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


class IntDomain:
    """
    Fixed-width signed integer arithmetic.

    Args:
        config: Integer width and overflow behaviour. Defaults to
                checked int32.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.min_value = self.config.min_value
        self.max_value = self.config.max_value
        self._modulus = 1 << self.config.bits

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def check(self, value: Any, what: str = "value") -> int:
        """
        Validate an input integer and return it as a plain int.

        Inputs are never wrapped: an out-of-range input is rejected in
        every overflow mode.

        Raises:
            DomainError: If value is not an integer.
            IntegerOverflowError: If value is outside the domain.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise DomainError(what, value)
        value = int(value)
        if not self.contains(value):
            raise IntegerOverflowError(f"input {what}", value, self.config.int_type)
        return value

    def narrow(self, value: int, op: str) -> int:
        """Bring an exact intermediate result back into the domain."""
        if self.contains(value):
            return value
        if self.config.overflow is OverflowMode.CHECKED:
            raise IntegerOverflowError(op, value, self.config.int_type)

        wrapped = (value - self.min_value) % self._modulus + self.min_value
        logger.debug("%s wrapped %d to %d in %s", op, value, wrapped, self.config.int_type)
        return wrapped

    def add(self, a: int, b: int) -> int:
        return self.narrow(a + b, "add")

    def mul(self, a: int, b: int) -> int:
        return self.narrow(a * b, "mul")

    def neg(self, a: int) -> int:
        return self.narrow(-a, "neg")

    def abs(self, a: int) -> int:
        return self.narrow(abs(a), "abs")

    def muladd(self, a: int, b: int, c: int) -> int:
        """a * b + c, narrowing after each step."""
        return self.add(self.mul(a, b), c)

    def divmod_trunc(self, p: int, q: int) -> tuple[int, int]:
        """
        Truncating division and remainder as a single operation.

        The quotient rounds toward zero and the remainder takes the sign
        of the dividend, so p == q * quotient + remainder always holds.
        This differs from Python's divmod() whenever p and q have
        opposite signs.

        Raises:
            ZeroDivisionError: If q is zero.
        """
        if q == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(p) // abs(q)
        if (p < 0) != (q < 0):
            quotient = -quotient
        remainder = p - q * quotient
        # MIN / -1 is the only quotient that can leave the domain
        return self.narrow(quotient, "div"), remainder

    def __repr__(self) -> str:
        return f"IntDomain({self.config!r})"
