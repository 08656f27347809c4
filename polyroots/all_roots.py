"""Root finders that find all roots of a polynomial at once."""

from __future__ import annotations

from typing import Iterable

from polyroots.halley import halley
from polyroots.many_roots import NextRootFun
from polyroots.naive import naive
from polyroots.newton import newton
from polyroots.poly import Poly
from polyroots.scalar import tiny_safe


def deflate(
    next_root_fun: NextRootFun,
    poly: Poly,
    epsilon: float | None = None,
    max_iter: int | None = None,
    initial_guesses: Iterable[complex] = (),
) -> list[complex]:
    """Find all roots by repeatedly finding one root and dividing it out.

    ``poly`` is deflated in place until only its constant remains. Trivial
    roots (zero, linear and quadratic factors) are solved directly. Guesses
    from ``initial_guesses`` are handed to ``next_root_fun`` one per call
    until they run out. Errors raised by ``next_root_fun`` pass through.
    """
    eps = epsilon if epsilon is not None else tiny_safe()
    guesses = iter(initial_guesses)
    roots: list[complex] = []

    while True:
        roots.extend(poly.zero_roots(eps))
        degree = poly.degree()
        if degree == 1:
            roots.extend(poly.linear_roots())
        elif degree == 2:
            roots.extend(poly.quadratic_roots())

        if poly.degree() == 0:
            return roots

        found, _ = next_root_fun(poly, eps, max_iter, next(guesses, None))
        root = found[0]
        roots.append(root)
        poly.deflate_composite(root)


def halley_deflate(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """All roots using a modified Halley's method with deflation."""
    return deflate(halley, poly, epsilon, max_iter, initial_guesses)


def naive_deflate(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """All roots using the plain Newton-Raphson iteration with deflation.

    This is fragile; :func:`newton_deflate` is the robust alternative.
    """
    return deflate(naive, poly, epsilon, max_iter, initial_guesses)


def newton_deflate(poly, epsilon=None, max_iter=None, initial_guesses=()):
    """All roots using Madsen's modified Newton method with deflation."""
    return deflate(newton, poly, epsilon, max_iter, initial_guesses)