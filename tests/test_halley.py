import pytest

from polyroots.halley import halley
from polyroots.poly import Poly
from polyroots.single_root import NoConvergeError


@pytest.mark.parametrize(
    ("poly", "epsilon", "max_iter", "guess", "candidates", "tol"),
    [
        (Poly.from_roots([1.0, 2.0, 3.0]), 1e-14, 100, None, [1.0, 2.0, 3.0], 1e-5),
        (Poly.from_roots([1.0, 1j, -1j]), 1e-14, 100, 0.5 + 0.5j, [1.0, 1j, -1j], 1e-5),
        (Poly([-1.0, 1.0]), 1e-20, 200, 5.0, [1.0], 1e-8),
    ],
    ids=["real_default_guess", "complex", "linear"],
)
def test_converges_to_a_root(poly, epsilon, max_iter, guess, candidates, tol):
    roots, count = halley(poly, epsilon, max_iter, guess)
    assert len(roots) == 1
    assert min(abs(roots[0] - c) for c in candidates) < tol
    assert count > 0


def test_exact_root_returns_immediately():
    assert halley(Poly.from_roots([1.0, 2.0, 3.0]), 1e-14, 100, 2.0) == ([2.0], 0)


def test_max_iter_zero_raises_with_guess():
    p = Poly.from_roots([1.0, 2.0, 3.0])
    with pytest.raises(NoConvergeError) as info:
        halley(p, 1e-14, 0, 10.0)
    assert info.value.roots == [10.0]


def test_residual_is_small():
    p = Poly.from_roots([-2.0, 0.5, 4.0, 1 + 1j])
    roots, _ = halley(p, 1e-20, 200, None)
    assert abs(p.eval(roots[0])) < 1e-6