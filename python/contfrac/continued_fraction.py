# ContFrac SDK - Continued Fraction Engine
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""
Finite simple continued fractions of rational numbers.

A rational p/q is represented as [a0; a1, a2, ...] where

    p/q = a0 + 1/(a1 + 1/(a2 + 1/(...)))

Example:
    >>> from contfrac import ContinuedFraction
    >>> cf = ContinuedFraction.from_rational(89, 55)
    >>> cf.coefficients()
    (1, 1, 1, 1, 1, 1, 1, 1, 2)
    >>> ContinuedFraction.from_rational(22, 7).convergents()
    [Convergent(h=3, k=1), Convergent(h=22, k=7)]

Division follows truncating semantics (quotient toward zero, remainder
with the sign of the dividend), so negative numerators give a different
sequence than floor-based expansions do:
    >>> ContinuedFraction.from_rational(-7, 3).coefficients()
    (-2, -3)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Union

import numpy as np

from .arith import IntDomain
from .config import Config, DEFAULT_CONFIG
from .exceptions import DegenerateRational
from .rational import RationalLike, as_pair, normalize


logger = logging.getLogger(__name__)


class Convergent(NamedTuple):
    """The n-th convergent h/k of a continued fraction."""
    h: int
    k: int

    def as_fraction(self) -> Fraction:
        """
        Raises:
            DegenerateRational: If k is zero.
        """
        if self.k == 0:
            raise DegenerateRational(self.h, self.k)
        return Fraction(self.h, self.k)


def expand(p: int, q: int, domain: IntDomain) -> list[int]:
    """
    Euclidean expansion of a normalized pair (q >= 0) into coefficients.

    Each step is one truncating division: the quotient is the next
    coefficient and (p, q) becomes (q, remainder). Returns an empty list
    when q is 0.
    """
    coefficients = []
    while q != 0:
        a, r = domain.divmod_trunc(p, q)
        coefficients.append(a)
        p, q = q, r
    return coefficients


def fold(coefficients: Sequence[int], domain: IntDomain) -> tuple[int, int]:
    """
    Evaluate coefficients back to a (num, den) pair, last term first.

    The pair is not re-reduced or sign-normalized. An empty sequence
    folds to (0, 1).
    """
    if not coefficients:
        return 0, 1

    num, den = coefficients[-1], 1
    for a in reversed(coefficients[:-1]):
        num, den = domain.muladd(a, num, den), num
    return num, den


def convergents_of(coefficients: Iterable[int], domain: IntDomain) -> list[Convergent]:
    """
    Successive convergents via h_n = a_n*h_{n-1} + h_{n-2} (same for k).

    Seeded with (h_{-2}, k_{-2}) = (0, 1) and (h_{-1}, k_{-1}) = (1, 0).
    """
    result = []
    h_2, k_2 = 0, 1
    h_1, k_1 = 1, 0
    for a in coefficients:
        h = domain.muladd(a, h_1, h_2)
        k = domain.muladd(a, k_1, k_2)
        result.append(Convergent(h, k))
        h_2, k_2 = h_1, k_1
        h_1, k_1 = h, k
    return result


@dataclass(frozen=True)
class ContinuedFraction:
    """
    An immutable finite simple continued fraction.

    Two continued fractions are equal when their coefficient sequences
    are equal; the configuration they were computed under is not compared.

    Build instances with from_rational(), from_fraction() or
    from_coefficients().
    """
    terms: tuple[int, ...]
    config: Config = field(default=DEFAULT_CONFIG, compare=False)

    def __post_init__(self):
        domain = IntDomain(self.config)
        terms = tuple(
            domain.check(a, f"coefficient {i}") for i, a in enumerate(self.terms)
        )
        object.__setattr__(self, 'terms', terms)

    @classmethod
    def from_rational(cls, p: int, q: int, config: Optional[Config] = None) -> ContinuedFraction:
        """
        Expand p/q into its continued fraction.

        The pair is first reduced to lowest terms with the sign moved onto
        the numerator. A zero denominator with a non-zero numerator has no
        finite expansion and yields an empty continued fraction (see
        is_finite).

        Args:
            p: Numerator.
            q: Denominator.
            config: Integer width and overflow behaviour.

        Raises:
            DegenerateRational: If p and q are both zero.
            DomainError: If p or q is not an integer.
            IntegerOverflowError: If p or q is outside the integer domain,
                or an intermediate overflows under checked arithmetic.
        """
        config = config if config is not None else DEFAULT_CONFIG
        domain = IntDomain(config)
        p = domain.check(p, "numerator")
        q = domain.check(q, "denominator")

        p, q = normalize(p, q, domain)
        if q == 0:
            logger.debug("%d/0 has no finite continued fraction", p)

        return cls(tuple(expand(p, q, domain)), config)

    @classmethod
    def from_fraction(cls, value: RationalLike, config: Optional[Config] = None) -> ContinuedFraction:
        """
        Expand an int, a Fraction or a (p, q) pair.

        Examples:
            >>> ContinuedFraction.from_fraction(Fraction('1.5')).coefficients()
            (1, 2)
        """
        p, q = as_pair(value)
        return cls.from_rational(p, q, config)

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[int], config: Optional[Config] = None) -> ContinuedFraction:
        """Wrap an existing coefficient sequence [a0, a1, ...]."""
        config = config if config is not None else DEFAULT_CONFIG
        return cls(tuple(coefficients), config)

    @property
    def domain(self) -> IntDomain:
        return IntDomain(self.config)

    @property
    def is_finite(self) -> bool:
        """False for the empty expansion of p/0."""
        return bool(self.terms)

    def coefficients(self) -> tuple[int, ...]:
        """The coefficients [a0, a1, ...] in expansion order."""
        return self.terms

    def to_rational(self) -> tuple[int, int]:
        """
        Fold the coefficients back into a (num, den) pair.

        The result equals the original p/q by cross-multiplication; it is
        not necessarily the same literal pair.
        """
        return fold(self.terms, self.domain)

    def to_fraction(self) -> Fraction:
        """
        The value as a reduced Fraction.

        Raises:
            DegenerateRational: If the coefficients fold to a zero
                denominator (possible only for hand-built sequences).
        """
        num, den = self.to_rational()
        if den == 0:
            raise DegenerateRational(
                num, den,
                f"Coefficients {list(self.terms)} fold to {num}/0",
            )
        return Fraction(num, den)

    def convergents(self) -> list[Convergent]:
        """One convergent (h, k) per coefficient, in expansion order."""
        return convergents_of(self.terms, self.domain)

    def convergents_array(self) -> np.ndarray:
        """Convergents as a (len(self), 2) array in the configured dtype."""
        return np.array(self.convergents(), dtype=self.config.int_type).reshape(-1, 2)

    def best_approximation(self, max_denominator: int) -> Fraction:
        """
        Closest fraction to this value with denominator <= max_denominator.

        Candidates are the last convergent within the bound and the best
        semiconvergent after it; ties go to the convergent. Negative values
        are approximated by magnitude.

        Examples:
            >>> ContinuedFraction.from_rational(355, 113).best_approximation(100)
            Fraction(311, 99)

        Raises:
            ValueError: If max_denominator < 1.
            DegenerateRational: If the continued fraction is empty.
            IntegerOverflowError: If the magnitude of a negative value does
                not fit the integer domain.
        """
        if max_denominator < 1:
            raise ValueError(f"max_denominator must be at least 1, got {max_denominator}")
        if not self.terms:
            raise DegenerateRational(1, 0, "An empty continued fraction has no value to approximate")

        value = self.to_fraction()
        if value < 0:
            magnitude = ContinuedFraction.from_fraction(-value, self.config)
            return -magnitude.best_approximation(max_denominator)

        # Expansion of a non-negative value has positive, increasing k_n
        convergents = ContinuedFraction.from_fraction(value, self.config).convergents()
        if convergents[-1].k <= max_denominator:
            return value

        n = max(i for i, c in enumerate(convergents) if c.k <= max_denominator)
        h_1, k_1 = convergents[n]
        h_2, k_2 = convergents[n - 1] if n > 0 else (1, 0)

        j = (max_denominator - k_2) // k_1
        semi = Fraction(j * h_1 + h_2, j * k_1 + k_2)
        best = Fraction(h_1, k_1)
        if abs(best - value) <= abs(semi - value):
            return best
        return semi

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[int]:
        return iter(self.terms)

    def __getitem__(self, index: Union[int, slice]) -> Union[int, tuple[int, ...]]:
        return self.terms[index]

    def __bool__(self) -> bool:
        return self.is_finite

    def __str__(self) -> str:
        if not self.terms:
            return "[]"
        head, *tail = self.terms
        if not tail:
            return f"[{head}]"
        return f"[{head}; {', '.join(str(a) for a in tail)}]"

    def __repr__(self) -> str:
        return f"ContinuedFraction({list(self.terms)})"
