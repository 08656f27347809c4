"""Single root finder using the plain Newton-Raphson iteration."""

from __future__ import annotations

import itertools
import logging

from polyroots.newton import _check_max_iter, _norm_sqr, _stalled, _start
from polyroots.poly import Poly
from polyroots.single_root import LazyDerivatives, NoConvergeError

_log = logging.getLogger(__name__)


def naive(
    poly: Poly,
    epsilon: float,
    max_iter: int | None = None,
    initial_guess: complex | None = None,
) -> tuple[list[complex], int]:
    """Find a single root with the naive Newton method.

    Returns the found roots (usually one) and the number of iterations.
    Raises :class:`NoConvergeError` if ``max_iter`` is exceeded or the
    iteration lands on a point where the derivative vanishes.
    """
    guess = _start(poly, initial_guess)
    guess_old = guess
    guess_old_old = guess
    diffs = LazyDerivatives(poly)

    for i in itertools.count():
        px = poly.eval(guess)
        if _norm_sqr(px) <= epsilon or _stalled(i, guess, guess_old, guess_old_old):
            return [guess], i
        _check_max_iter(i, max_iter, [guess])

        pdx = diffs.get_nth_derivative(1).eval(guess)
        if pdx == 0:
            _log.debug("derivative vanished at %s", guess)
            raise NoConvergeError([guess])

        guess_old_old = guess_old
        guess_old = guess
        guess -= px / pdx

    raise AssertionError("unreachable")