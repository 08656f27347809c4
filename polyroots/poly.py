"""Polynomials with complex coefficients and a few special families."""

from __future__ import annotations

import cmath
import math
import numbers
import warnings
from functools import reduce
from itertools import takewhile, zip_longest
from typing import Iterable, Iterator


def _int_to_float(x: int) -> float:
    """Convert an integer to float, saturating to infinity on overflow."""
    try:
        return float(x)
    except OverflowError:
        return math.inf


def factorial(n: int) -> int:
    """Exact factorial of ``n``."""
    return math.factorial(n)


def bessel_coeff(n: int, k: int) -> float:
    """The coefficient of the k-th term of the n-th Bessel polynomial."""
    if not 0 <= k <= n:
        raise ValueError(f"term index {k} is out of range for degree {n}")
    # Dividing exactly before converting keeps the result finite for more terms.
    aux = factorial(n + k) // factorial(n - k) // factorial(k)
    return _int_to_float(aux) * math.ldexp(1.0, -k)


class Poly:
    """A polynomial with complex coefficients, lowest degree first.

    Trailing zero coefficients are removed; the zero polynomial holds a single
    zero coefficient.
    """

    __hash__ = None  # mutable

    def __init__(self, coeffs: Iterable[complex | float] = ()) -> None:
        self._coeffs = [complex(c) for c in coeffs]
        self._normalize()

    def _normalize(self) -> None:
        while len(self._coeffs) > 1 and self._coeffs[-1] == 0:
            self._coeffs.pop()
        if not self._coeffs:
            self._coeffs.append(0j)

    # construction

    @classmethod
    def from_roots(cls, roots: Iterable[complex | float]) -> Poly:
        """The monic polynomial with exactly the given roots."""
        return reduce(lambda acc, r: acc * cls([-complex(r), 1.0]), roots, cls.one())

    @classmethod
    def term(cls, coeff: complex | float, degree: int) -> Poly:
        """The monomial ``coeff * x**degree``."""
        if degree < 0:
            raise ValueError("degree must be non-negative")
        return cls([0.0] * degree + [coeff])

    @classmethod
    def one(cls) -> Poly:
        """The constant polynomial 1."""
        return cls([1.0])

    # inspection

    def is_one(self) -> bool:
        return self._coeffs == [1 + 0j]

    def degree(self) -> int:
        """Number of coefficients minus one (0 for constants and for zero)."""
        return len(self._coeffs) - 1

    def is_monic(self) -> bool:
        return self._coeffs[-1] == 1

    @property
    def coeffs(self) -> list[complex]:
        """A copy of the coefficients, lowest degree first."""
        return list(self._coeffs)

    def eval(self, x: complex | float) -> complex:
        """Evaluate at ``x`` using Horner's scheme."""
        x = complex(x)
        return reduce(lambda acc, c: acc * x + c, reversed(self._coeffs), 0j)

    def eval_multiple(self, points: Iterable[complex | float]) -> list[complex]:
        return [self.eval(z) for z in points]

    def diff(self) -> Poly:
        """The first derivative."""
        return Poly(c * k for k, c in enumerate(self._coeffs) if k > 0)

    # in-place manipulation

    def make_monic(self) -> None:
        """Divide by the leading coefficient, unless it is zero."""
        lead = self._coeffs[-1]
        if lead != 0:
            self._coeffs = [c / lead for c in self._coeffs]
            self._coeffs[-1] = 1 + 0j

    def zero_roots(self, epsilon: float) -> list[complex]:
        """Factor out roots at zero, whose constant coefficient has
        ``abs(c)**2 <= epsilon``, and return them."""
        count = sum(
            1
            for _ in takewhile(
                lambda c: abs(c) ** 2 <= epsilon, self._coeffs[: len(self._coeffs) - 1]
            )
        )
        del self._coeffs[:count]
        return [0j] * count

    def linear_roots(self) -> list[complex]:
        """Solve a degree-1 polynomial, leaving its leading coefficient."""
        if self.degree() != 1:
            raise ValueError("linear_roots requires a polynomial of degree 1")
        b, a = self._coeffs
        self._coeffs = [a]
        return [-b / a]

    def quadratic_roots(self) -> list[complex]:
        """Solve a degree-2 polynomial, leaving its leading coefficient."""
        if self.degree() != 2:
            raise ValueError("quadratic_roots requires a polynomial of degree 2")
        c, b, a = self._coeffs
        disc = cmath.sqrt(b * b - 4 * a * c)
        s = b + disc if abs(b + disc) >= abs(b - disc) else b - disc
        self._coeffs = [a]
        if s == 0:
            return [0j, 0j]
        q = -s / 2
        return [q / a, c / q]

    def deflate_composite(self, root: complex | float) -> None:
        """Divide out the factor ``(x - root)`` using composite deflation.

        Coefficients above the largest term ``|a_j * root**j|`` come from
        forward deflation, those below from backward deflation.
        """
        if self.degree() < 1:
            raise ValueError("cannot deflate a constant polynomial")
        r = complex(root)
        a = self._coeffs

        if r == 0:
            split = 0
        else:
            log_r = math.log(abs(r))
            weights = [
                math.log(abs(c)) + j * log_r if c != 0 else -math.inf
                for j, c in enumerate(a)
            ]
            split = max(range(len(weights)), key=weights.__getitem__)

        forward: list[complex] = []
        acc = 0j
        for c in reversed(a[split + 1 :]):
            acc = c + r * acc
            forward.append(acc)
        forward.reverse()

        backward: list[complex] = []
        acc = 0j
        for c in a[:split]:
            acc = (acc - c) / r
            backward.append(acc)

        self._coeffs = backward + forward
        self._normalize()

    # special polynomials

    @classmethod
    def cheby(cls, n: int) -> Poly:
        """Deprecated alias of :meth:`cheby1`."""
        warnings.warn("use cheby1 instead", DeprecationWarning, stacklevel=2)
        return cls.cheby1(n)

    @classmethod
    def cheby1(cls, n: int) -> Poly:
        """The n-th Chebyshev polynomial of the first kind."""
        if n < 0:
            raise ValueError("n must be non-negative")
        base = [
            [1.0],
            [0.0, 1.0],
            [-1.0, 0.0, 2.0],
            [0.0, -3.0, 0.0, 4.0],
            [1.0, 0.0, -8.0, 0.0, 8.0],
        ]
        if n < len(base):
            return cls(base[n])
        two_x = cls([0.0, 2.0])
        older, old = cls(base[3]), cls(base[4])
        for _ in range(len(base), n + 1):
            older, old = old, two_x * old - older
        return old

    @classmethod
    def bessel(cls, n: int) -> Poly:
        """The n-th Bessel polynomial."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return cls(bessel_coeff(n, k) for k in range(n + 1))

    @classmethod
    def reverse_bessel(cls, n: int) -> Poly:
        """The n-th reverse Bessel polynomial."""
        return cls(reversed(cls.bessel(n).coeffs))

    @classmethod
    def legendre(cls, n: int) -> Poly:
        """The n-th Legendre polynomial."""
        if n < 0:
            raise ValueError("n must be non-negative")
        older, old = cls([1.0]), cls([0.0, 1.0])
        if n == 0:
            return older
        for i in range(2, n + 1):
            step = cls([0.0, (2 * i - 1) / i]) * old + cls([(1 - i) / i]) * older
            older, old = old, step
        return old

    # arithmetic and protocols

    @staticmethod
    def _coerce(other: object) -> Poly | None:
        if isinstance(other, Poly):
            return other
        if isinstance(other, numbers.Number):
            return Poly([other])
        return None

    def __add__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Poly(x + y for x, y in zip_longest(self._coeffs, rhs._coeffs, fillvalue=0j))

    __radd__ = __add__

    def __sub__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Poly(x - y for x, y in zip_longest(self._coeffs, rhs._coeffs, fillvalue=0j))

    def __rsub__(self, other: object) -> Poly:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __neg__(self) -> Poly:
        return Poly(-c for c in self._coeffs)

    def __mul__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        out = [0j] * (len(self._coeffs) + len(rhs._coeffs) - 1)
        for i, x in enumerate(self._coeffs):
            for j, y in enumerate(rhs._coeffs):
                out[i + j] += x * y
        return Poly(out)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __iter__(self) -> Iterator[complex]:
        return iter(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __repr__(self) -> str:
        return f"Poly({self._coeffs!r})"

    def __str__(self) -> str:
        return " + ".join(f"{c}*x^{k}" for k, c in enumerate(self._coeffs))