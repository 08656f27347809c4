"""Root finders that find several roots at once from several guesses."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple, List

from polyroots.halley import halley
from polyroots.naive import naive
from polyroots.newton import newton
from polyroots.poly import Poly

_log = logging.getLogger(__name__)

NextRootFun = Callable[
    [Poly, float, Optional[int], Optional[complex]], Tuple[List[complex], int]
]


def parallel(
    next_root_fun: NextRootFun,
    poly: Poly,
    epsilon: float | None = None,
    max_iter: int | None = None,
    initial_guesses: Iterable[complex] = (),
) -> list[complex]:
    """Run a single-root finder once per initial guess.

    The polynomial is made monic in place. Errors raised by
    ``next_root_fun`` pass through.
    """
    poly.make_monic()
    eps = epsilon if epsilon is not None else 0.0

    roots: list[complex] = []
    for z in initial_guesses:
        _log.debug("next root")
        found, _ = next_root_fun(poly, eps, max_iter, z)
        roots.extend(found)
    return roots


def naive_parallel(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """Naive Newton's method for each of several initial guesses."""
    return parallel(naive, poly, epsilon, max_iter, initial_guesses)


def newton_parallel(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """Newton's method for each of several initial guesses."""
    return parallel(newton, poly, epsilon, max_iter, initial_guesses)


def halley_parallel(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """Halley's method for each of several initial guesses."""
    return parallel(halley, poly, epsilon, max_iter, initial_guesses)