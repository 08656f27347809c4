import pytest

from polyroots.many_roots import (
    halley_parallel,
    naive_parallel,
    newton_parallel,
    parallel,
)
from polyroots.poly import Poly
from polyroots.single_root import NoConvergeError

EXPECTED = [1.0, 2.0, 3.0]
GUESSES = [0.9, 2.1, 3.1]


@pytest.mark.parametrize("epsilon", [1e-14, None])
def test_naive_parallel_finds_each_root(epsilon):
    roots = naive_parallel(Poly.from_roots(EXPECTED), epsilon, 100, GUESSES)
    assert len(roots) == 3
    assert all(abs(found - want) < 1e-6 for found, want in zip(roots, EXPECTED))


def test_makes_polynomial_monic():
    p = Poly.from_roots(EXPECTED) * 2.0
    roots = naive_parallel(p, 1e-14, 100, GUESSES)
    assert p.is_monic()
    assert p == Poly.from_roots(EXPECTED)
    assert abs(roots[0] - 1.0) < 1e-6


def test_empty_guesses_give_no_roots():
    assert naive_parallel(Poly.from_roots(EXPECTED), 1e-14, 100, []) == []


def test_errors_pass_through():
    with pytest.raises(NoConvergeError) as info:
        naive_parallel(Poly.from_roots(EXPECTED), 1e-14, 0, [10.0])
    assert info.value.roots == [10.0]


def test_parallel_passes_arguments_in_order():
    calls = []

    def fake(poly, epsilon, max_iter, guess):
        calls.append((epsilon, max_iter, guess, poly.is_monic()))
        return [guess * 2], 1

    roots = parallel(fake, Poly([4.0, 2.0]), None, 7, [1.0, 2j])
    assert roots == [2.0, 4j]
    assert calls == [(0.0, 7, 1.0, True), (0.0, 7, 2j, True)]