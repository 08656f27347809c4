import pytest

from polyroots.poly import Poly
from polyroots.single_root import (
    LazyDerivatives,
    NoConvergeError,
    line_search_accelerate,
    line_search_decelerate,
    multiplicity_lagouanelle,
    stopping_criterion_garwick,
)

CUBIC = [1.0, 2.0, 3.0, 4.0]

IN_ORDER = [
    (0, [1.0, 2.0, 3.0, 4.0], 0),
    (1, [2.0, 6.0, 12.0], 1),
    (2, [6.0, 24.0], 2),
    (3, [24.0], 3),
    (4, [0.0], 4),
]

OUT_OF_ORDER = [
    (2, [6.0, 24.0], 2),
    (0, [1.0, 2.0, 3.0, 4.0], 2),
    (3, [24.0], 3),
    (4, [0.0], 4),
    (1, [2.0, 6.0, 12.0], 4),
]


@pytest.mark.parametrize("steps", [IN_ORDER, OUT_OF_ORDER], ids=["in_order", "out_of_order"])
def test_lazy_derivative(steps):
    lazy = LazyDerivatives(Poly(CUBIC))
    for n, expected, cached in steps:
        assert lazy.get_nth_derivative(n) == Poly(expected)
        assert len(lazy.first_and_higher) == cached


def test_lazy_derivative_negative_order():
    lazy = LazyDerivatives(Poly([1.0, 2.0]))
    with pytest.raises(ValueError):
        lazy.get_nth_derivative(-1)


def test_no_converge_error_keeps_roots():
    err = NoConvergeError([1 + 2j])
    assert err.roots == [1 + 2j]


@pytest.mark.parametrize(
    ("z", "z_old", "z_old_old", "expected"),
    [
        (0j, 1e-5 + 0j, 1e-5 + 0j, True),
        (1.0 + 0j, 1.0001 + 0j, 2.0 + 0j, False),
        (5.0 + 0j, 1.0 + 0j, 1.0 + 0j, False),
    ],
    ids=["stalled_near_zero", "still_improving", "large_step"],
)
def test_garwick(z, z_old, z_old_old, expected):
    assert stopping_criterion_garwick(z, z_old, z_old_old) is expected


@pytest.mark.parametrize(
    ("px", "pdx", "pddx", "expected"),
    [
        # p = x^2 at x = 0.3 + 0.1j: p' = 2x, p'' = 2
        ((0.3 + 0.1j) ** 2, 2 * (0.3 + 0.1j), 2 + 0j, 2 + 0j),
        (0j, 3 + 0j, 1 + 0j, 1 + 0j),
    ],
    ids=["double_root", "simple_root"],
)
def test_lagouanelle(px, pdx, pddx, expected):
    assert multiplicity_lagouanelle(px, pdx, pddx) == pytest.approx(expected)


@pytest.mark.parametrize(
    ("search", "guess", "delta", "expected", "count"),
    [
        (line_search_accelerate, 0j, -1 + 0j, 2 + 0j, 2),
        (line_search_decelerate, 1 + 0j, -4 + 0j, complex(1.6, 0.8), 3),
        (line_search_decelerate, 1 + 0j, -1 + 0j, 1.5 + 0j, 2),
    ],
    ids=["accelerate", "decelerate_rotates", "decelerate_stops_when_worse"],
)
def test_line_search(search, guess, delta, expected, count):
    found, evaluations = search(Poly([-4.0, 0.0, 1.0]), guess, delta)
    assert found == pytest.approx(expected)
    assert evaluations == count