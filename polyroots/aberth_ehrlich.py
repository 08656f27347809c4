"""The Aberth-Ehrlich method, which refines guesses for all roots together."""

from __future__ import annotations

import itertools
import logging
from typing import Sequence

from polyroots.newton import _div, _norm_sqr
from polyroots.poly import Poly
from polyroots.scalar import tiny_safe
from polyroots.single_root import NoConvergeError

_log = logging.getLogger(__name__)


def _alphas(poly: Poly, points: list[complex]) -> list[complex]:
    p_diff = poly.diff()
    return [_div(poly.eval(z), p_diff.eval(z)) for z in points]


def _betas(points: list[complex]) -> list[complex]:
    return [
        sum((_div(1.0, zi - zj) for j, zj in enumerate(points) if j != i), 0j)
        for i, zi in enumerate(points)
    ]


def aberth_ehrlich(
    poly: Poly,
    epsilon: float | None = None,
    max_iter: int | None = None,
    initial_guesses: Sequence[complex] = (),
) -> list[complex]:
    """Find all roots with the Aberth-Ehrlich method.

    There must be one distinct guess per root, i.e. at least as many guesses
    as the degree of ``poly``; extra guesses are ignored. The method performs
    poorly near zero roots, which are best factored out first. ``poly`` is
    made monic in place. Raises :class:`NoConvergeError` with the current
    points if ``max_iter`` is exceeded, and :class:`ValueError` for too few
    or repeated guesses.
    """
    n = poly.degree()
    guesses = [complex(z) for z in initial_guesses]
    if len(guesses) < n:
        raise ValueError(f"expected {n} initial guesses, got {len(guesses)}")
    points = guesses[:n]
    if any(_norm_sqr(a - b) <= 0 for a, b in itertools.combinations(points, 2)):
        raise ValueError("initial guesses must be distinct")

    eps = epsilon if epsilon is not None else tiny_safe()

    if n == 0:
        return []

    poly.make_monic()

    for i in itertools.count():
        if max_iter is not None and i > max_iter:
            raise NoConvergeError(points)

        alphas = _alphas(poly, points)
        betas = _betas(points)
        deltas = [_div(a, 1.0 - a * b) for a, b in zip(alphas, betas)]
        points = [z - d for z, d in zip(points, deltas)]

        _log.debug("%s", points)

        if all(_norm_sqr(d) <= eps for d in deltas):
            return points

    raise AssertionError("unreachable")