"""Safe ranges for floating point division with real and complex numbers.

The constants fulfil ``large_safe() / small_safe() <= sys.float_info.max``.
If a numerator is at most ``large_safe()`` and a denominator at least
``small_safe()``, their quotient is always finite. A value of at least
``tiny_safe()`` always has a finite reciprocal.

For complex numbers, ``is_tiny`` and ``is_small`` hold when both components
satisfy them. ``is_large`` holds when either component does.
"""

from __future__ import annotations

import math
import sys

_INFO = sys.float_info


def tiny_safe() -> float:
    """Smallest value that is safe for reciprocals."""
    return _INFO.min


def small_safe() -> float:
    """Smallest value that is safe for use as a denominator."""
    return math.sqrt(_INFO.min) / _INFO.epsilon


def large_safe() -> float:
    """Largest value that is safe for use as a numerator."""
    return _INFO.max * small_safe()


def _components(x: complex | float) -> tuple[float, float] | None:
    if isinstance(x, complex):
        return x.real, x.imag
    return None


def is_tiny(x: complex | float) -> bool:
    """True if ``x`` is below :func:`tiny_safe`, i.e. unsafe for reciprocals."""
    parts = _components(x)
    if parts is not None:
        return all(is_tiny(part) for part in parts)
    return abs(x) < tiny_safe()


def is_small(x: complex | float) -> bool:
    """True if ``x`` is below :func:`small_safe`, i.e. unsafe as a denominator."""
    parts = _components(x)
    if parts is not None:
        return all(is_small(part) for part in parts)
    return abs(x) < small_safe()


def is_large(x: complex | float) -> bool:
    """True if ``x`` is above :func:`large_safe`, i.e. unsafe as a numerator."""
    parts = _components(x)
    if parts is not None:
        return any(is_large(part) for part in parts)
    return abs(x) > large_safe()


def recip(x: complex | float) -> complex | float:
    """The reciprocal ``1 / x``."""
    return 1.0 / x