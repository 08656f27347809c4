"""Single root finder using a modified Halley's method."""

from __future__ import annotations

import itertools
import logging

from polyroots.newton import (
    _BACKOFF,
    _check_max_iter,
    _CycleDetector,
    _damp,
    _line_search,
    _norm_sqr,
    _stalled,
    _start,
)
from polyroots.poly import Poly
from polyroots.single_root import LazyDerivatives, multiplicity_lagouanelle

_log = logging.getLogger(__name__)


def _step(px: complex, pdx: complex, pddx: complex, delta_old: complex) -> complex:
    """The Halley step, rotated and scaled in degenerate or exploding cases."""
    denom = 2.0 * (pdx * pdx) - px * pddx
    if denom == 0 or pdx == 0:
        _log.debug("local minimum, backing off")
        delta = delta_old * _BACKOFF
    else:
        m = multiplicity_lagouanelle(px, pdx, pddx)
        delta = (m + 1) * (px * pdx) / denom
    return _damp(delta, delta_old)


def halley(
    poly: Poly,
    epsilon: float,
    max_iter: int | None = None,
    initial_guess: complex | None = None,
) -> tuple[list[complex], int]:
    """Find a single root with a modified Halley's method.

    Returns the found roots (usually one) and the number of evaluations.
    Raises :class:`NoConvergeError` if ``max_iter`` is exceeded.
    """
    eval_counter = 0
    guess = _start(poly, initial_guess)
    guess_old = guess
    guess_old_old = guess
    guess_delta_old = 1 + 0j
    cycles = _CycleDetector(guess)
    diffs = LazyDerivatives(poly)

    for i in itertools.count():
        px = poly.eval(guess)
        px_norm = _norm_sqr(px)
        _log.debug("current guess %s, error %s", guess, px_norm)

        if px_norm <= epsilon or _stalled(i, guess, guess_old, guess_old_old):
            return [guess], eval_counter
        _check_max_iter(i, max_iter, [guess])

        guess = cycles.check(guess, px_norm, guess_delta_old)

        pdx = diffs.get_nth_derivative(1).eval(guess)
        pddx = diffs.get_nth_derivative(2).eval(guess)
        eval_counter += 2

        guess_delta = _step(px, pdx, pddx, guess_delta_old)

        eval_counter += 1
        overshooting = _norm_sqr(poly.eval(guess - guess_delta)) >= px_norm
        _log.debug("%s, adjusting step", "overshooting" if overshooting else "undershooting")
        guess_new, count = _line_search(poly, guess, guess_delta, overshooting)
        eval_counter += count

        guess_delta_old = guess_delta
        guess_old_old = guess_old
        guess_old = guess
        guess = guess_new

    raise AssertionError("unreachable")