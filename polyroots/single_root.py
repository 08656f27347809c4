"""Shared machinery for root finders that look for one root at a time."""

from __future__ import annotations

import logging
import math

from polyroots.poly import Poly

_log = logging.getLogger(__name__)


class NoConvergeError(Exception):
    """A root finder did not converge; ``roots`` holds its best guesses."""

    def __init__(self, roots: list[complex]) -> None:
        super().__init__(f"root finder did not converge, best guesses: {roots!r}")
        self.roots = list(roots)


def _norm_sqr(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def _div(num: complex, den: complex) -> complex:
    if den == 0:
        return complex(math.nan, math.nan)
    return num / den


def stopping_criterion_garwick(z: complex, z_old: complex, z_old_old: complex) -> bool:
    """Garwick & Ward stopping criterion: no further improvement is expected."""
    delta_z = _norm_sqr(z - z_old)
    delta_z_old = _norm_sqr(z_old - z_old_old)
    z_norm = _norm_sqr(z_old)
    em3, em4, em7 = 1e-3, 1e-4, 1e-7
    close = (z_norm < em4 and delta_z <= em7) or (
        z_norm >= em4 and delta_z / z_norm <= em3
    )
    return close and delta_z >= delta_z_old


class LazyDerivatives:
    """Derivatives of a polynomial, computed only when first requested."""

    def __init__(self, poly: Poly) -> None:
        self.zeroth = poly
        self.first_and_higher: list[Poly] = []

    def get_nth_derivative(self, n: int) -> Poly:
        if n < 0:
            raise ValueError("derivative order must be non-negative")
        if n == 0:
            return self.zeroth
        if not self.first_and_higher:
            self.first_and_higher.append(self.zeroth.diff())
        while len(self.first_and_higher) < n:
            self.first_and_higher.append(self.first_and_higher[-1].diff())
        return self.first_and_higher[n - 1]


def multiplicity_lagouanelle(px: complex, pdx: complex, pddx: complex) -> complex:
    """Estimate the multiplicity of a root (Lagouanelle 1966)."""
    pdx_2 = pdx * pdx
    return _div(pdx_2, pdx_2 - px * pddx)


def line_search_accelerate(
    poly: Poly, guess: complex, delta: complex
) -> tuple[complex, int]:
    """Lengthen the step while it keeps improving (Madsen 1973).

    Returns the best guess and the number of evaluations.
    """
    guess_best = guess - delta
    px_best_norm = _norm_sqr(poly.eval(guess_best))
    eval_count = 1
    for step_size in range(2, poly.degree() + 1):
        guess_new = guess - delta * step_size
        px_new_norm = _norm_sqr(poly.eval(guess_new))
        eval_count += 1
        if px_new_norm >= px_best_norm:
            break
        _log.debug("accelerated step %s: %s -> %s", step_size, guess_best, guess_new)
        px_best_norm = px_new_norm
        guess_best = guess_new
    return guess_best, eval_count


def line_search_decelerate(
    poly: Poly, guess: complex, delta: complex
) -> tuple[complex, int]:
    """Shorten the step while it keeps improving (Madsen 1973).

    Returns the new guess and the number of evaluations.
    """
    max_steps = 2
    rotation = complex(0.6, 0.8)  # about 53 degrees

    delta_best = delta
    px_best_norm = _norm_sqr(poly.eval(guess - delta_best))
    eval_count = 1
    for p in range(1, max_steps + 1):
        step_size = 1.0 / 2**p
        delta_new = delta * step_size
        guess_new = guess - delta_new
        px_new_norm = _norm_sqr(poly.eval(guess_new))
        eval_count += 1
        if px_new_norm >= px_best_norm:
            return guess_new, eval_count
        _log.debug("decelerated step %s: %s", step_size, guess_new)
        px_best_norm = px_new_norm
        delta_best = delta_new
    return guess - delta_best * rotation, eval_count