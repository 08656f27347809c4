"""Initial guesses for iterative root finders."""

from __future__ import annotations

import cmath
import math
import random
from typing import Iterable, Sequence

from polyroots.poly import Poly


def _norm_sqr(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def _div(num: complex, den: complex) -> complex:
    """Complex division that yields non-finite values instead of raising."""
    if den == 0:
        if num == 0:
            return complex(math.nan, math.nan)
        return complex(math.inf, math.inf)
    return num / den


def initial_guess_smallest(poly: Poly) -> complex:
    """Guess close to the root with the smallest magnitude (Madsen 1973)."""
    if len(poly) < 2:
        raise ValueError("an initial guess needs a polynomial of degree 1 or more")

    small = 1.0 / 1000.0
    pz = poly.eval(0j)
    pdz = poly.diff().eval(0j)

    # avoid dividing by zero
    if _norm_sqr(pdz) < small:
        pz += small
        pdz += small

    theta = cmath.phase(_div(-pz, pdz))
    direction = cmath.exp(1j * theta)

    a0, *rest = poly.coeffs
    candidates = [
        (direction * abs(a0 / ak)) ** (1.0 / k)
        for k, ak in enumerate(rest, start=1)
        if ak != 0
    ]
    guess = min(candidates, key=_norm_sqr) * 0.5

    if guess.imag == 0:
        # some methods cannot reach complex roots from a purely real guess
        guess += 1j / 1000.0
    return guess


def initial_guesses_circle(
    poly: Poly, bias: float, seed: int, perturbation: float, count: int
) -> list[complex]:
    """Equidistant points around a circle containing the roots.

    ``bias`` picks the radius: 0 is the lower bound, 1 the upper bound.
    ``perturbation`` controls randomisation: at 0 the points are exactly
    equidistant, at 1 each point is drawn at random within its slice of the
    annulus that holds all roots. Both parameters may be extrapolated.
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    # an odd number of slices keeps the points asymmetric, which helps
    # methods that stall on symmetric guesses
    n_odd = count + 1 if count % 2 == 0 else count

    rng = random.Random(seed)
    angle_increment = math.tau / n_odd
    low = lower_bound(poly)
    high = upper_bound(poly)
    span = high - low
    radius = high * bias + low * (1.0 - bias)

    guesses = []
    for k in range(count):
        angle = k * angle_increment + (
            rng.random() * angle_increment - angle_increment / 2.0
        ) * perturbation
        r = radius * (1.0 - perturbation) + (rng.random() * span + low) * perturbation
        guesses.append(cmath.rect(r, angle))
    return guesses


def upper_bound(poly: Poly) -> float:
    """Bound on the roots of a monic polynomial by Deutsch's simple formula."""
    if poly.degree() < 2:
        raise ValueError("upper bound needs degree 2 or more, use an explicit solver")
    if not poly.is_monic():
        raise ValueError("Deutsch's formula requires the polynomial to be monic")

    coeffs = poly.coeffs
    next_last = coeffs[-2]
    ratios = (
        _norm_sqr(_div(num, den)) for num, den in zip(coeffs[:-2], coeffs[1:-1])
    )
    max_term = next(ratios)
    for z in ratios:
        if z > max_term:
            max_term = z
    return _norm_sqr(next_last) + max_term


def lower_bound(poly: Poly) -> float:
    """Radius of a disk around the origin that contains none of the roots."""
    reversed_poly = Poly(reversed(poly.coeffs))
    reversed_poly.make_monic()
    bound = upper_bound(reversed_poly)
    return math.inf if bound == 0 else 1.0 / bound


def cross_2d(
    o: tuple[float, float], a: tuple[float, float], b: tuple[float, float]
) -> float:
    """Z component of the cross product of OA and OB.

    Positive for a counter-clockwise turn, negative for clockwise, zero when
    the points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def upper_convex_envelope(
    points: Iterable[Sequence[float]],
) -> list[tuple[float, float]]:
    """Upper envelope of the convex hull, from the rightmost point leftwards."""
    pts = [(float(x), float(y)) for x, y in points]
    if any(math.isnan(x) or math.isnan(y) for x, y in pts):
        raise ValueError("cannot order NaNs")
    pts.sort()

    upper: list[tuple[float, float]] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross_2d(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return upper