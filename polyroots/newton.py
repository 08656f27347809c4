"""Single root finder using Madsen's modified Newton method.

Also holds the step control shared by the other single root finders.
"""

from __future__ import annotations

import cmath
import itertools
import logging
import math

from polyroots.initial_guess import initial_guess_smallest
from polyroots.poly import Poly
from polyroots.scalar import is_small
from polyroots.single_root import (
    LazyDerivatives,
    NoConvergeError,
    line_search_accelerate,
    line_search_decelerate,
    stopping_criterion_garwick,
)

_log = logging.getLogger(__name__)

# arbitrary constants, originally chosen by Madsen
_BACKOFF = cmath.rect(5.0, 0.9250245)
_EXPLODE_THRESHOLD = 5.0
# iterations without improvement before assuming a cycle; prime to avoid meta-cycles
_CYCLE_COUNT_THRESHOLD = 17


def _norm_sqr(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def _div(num: complex, den: complex) -> complex:
    if den == 0:
        return complex(math.nan, math.nan)
    return num / den


def _start(poly: Poly, initial_guess: complex | None) -> complex:
    if initial_guess is None:
        return initial_guess_smallest(poly)
    return complex(initial_guess)


def _stalled(i: int, guess: complex, guess_old: complex, guess_old_old: complex) -> bool:
    """Whether numeric precision rules out further improvement."""
    return i > 3 and stopping_criterion_garwick(guess, guess_old, guess_old_old)


def _check_max_iter(i: int, max_iter: int | None, roots: list[complex]) -> None:
    if max_iter is not None and i >= max_iter:
        raise NoConvergeError(roots)


def _damp(delta: complex, delta_old: complex) -> complex:
    """Rotate and shrink a step that grew too quickly."""
    if _norm_sqr(delta) > _norm_sqr(delta_old) * _EXPLODE_THRESHOLD:
        _log.debug("exploding gradient, backing off")
        return delta * _BACKOFF * (_norm_sqr(delta_old) / _norm_sqr(delta))
    return delta


def _line_search(
    poly: Poly, guess: complex, delta: complex, overshooting: bool
) -> tuple[complex, int]:
    search = line_search_decelerate if overshooting else line_search_accelerate
    return search(poly, guess, delta)


class _CycleDetector:
    """Tracks the best guess and backs off when no progress is made."""

    __slots__ = ("counter", "best_guess", "best_px_norm")

    def __init__(self, guess: complex) -> None:
        self.counter = 0
        self.best_guess = guess
        self.best_px_norm = _norm_sqr(guess)

    def check(self, guess: complex, px_norm: float, delta: complex) -> complex:
        """Return the guess to continue from."""
        if px_norm < self.best_px_norm:
            self.counter = 0
            self.best_guess = guess
            self.best_px_norm = px_norm
            return guess
        self.counter += 1
        if self.counter <= _CYCLE_COUNT_THRESHOLD:
            return guess
        self.counter = 0
        _log.debug("cycle detected at %s, backing off from %s", guess, self.best_guess)
        return self.best_guess - delta * _BACKOFF


def compute_delta(px: complex, pdx: complex, delta_old: complex) -> complex:
    """The Newton step, rotated and scaled when the derivative vanishes or
    the step grows too quickly."""
    if pdx == 0:
        return delta_old * _BACKOFF
    return _damp(px / pdx, delta_old)


def check_will_converge(
    guess: complex,
    guess_old: complex,
    px: complex,
    pdx: complex,
    pdx_old: complex,
) -> bool:
    """Heuristic for whether ``guess`` is captured by the nearby root.

    Based on Ostrowski 1966, using an approximation by Vestermark.
    """
    if is_small(px * pdx):
        return False
    curvature = _norm_sqr(_div(pdx_old - pdx, guess_old - guess))
    return _norm_sqr(_div(px, pdx)) * 2.0 * curvature <= _norm_sqr(pdx)


def newton(
    poly: Poly,
    epsilon: float,
    max_iter: int | None = None,
    initial_guess: complex | None = None,
) -> tuple[list[complex], int]:
    """Find a single root with Madsen's modified Newton method.

    Returns the found roots (usually one) and the number of evaluations.
    Raises :class:`NoConvergeError` if ``max_iter`` is exceeded.
    """
    _log.debug(
        "newton: poly=%s epsilon=%s max_iter=%s initial_guess=%s",
        poly,
        epsilon,
        max_iter,
        initial_guess,
    )

    eval_counter = 0
    guess = _start(poly, initial_guess)
    guess_old = guess
    guess_old_old = guess
    guess_delta = 1 + 0j
    cycles = _CycleDetector(guess)
    diffs = LazyDerivatives(poly)

    for i in itertools.count():
        px = poly.eval(guess)
        eval_counter += 1

        if _norm_sqr(px) <= epsilon or _stalled(i, guess, guess_old, guess_old_old):
            return [cycles.best_guess], eval_counter
        _check_max_iter(i, max_iter, [cycles.best_guess])

        guess = cycles.check(guess, _norm_sqr(px), guess_delta)

        pdx = diffs.get_nth_derivative(1).eval(guess)
        eval_counter += 1

        guess_delta = compute_delta(px, pdx, guess_delta)

        guess_new = guess - guess_delta
        px_new = poly.eval(guess_new)
        pdx_new = diffs.get_nth_derivative(1).eval(guess_new)

        if not check_will_converge(guess_new, guess, px_new, pdx_new, pdx):
            # not captured yet: adjust the step until it falls towards a root
            overshooting = _norm_sqr(px_new) > _norm_sqr(px)
            guess_new, count = _line_search(poly, guess, guess_delta, overshooting)
            eval_counter += count

        guess_old_old = guess_old
        guess_old = guess
        guess = guess_new

    raise AssertionError("unreachable")