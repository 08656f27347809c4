import pytest

from polyroots.all_roots import deflate, halley_deflate, naive_deflate, newton_deflate
from polyroots.naive import naive
from polyroots.poly import Poly
from polyroots.single_root import NoConvergeError


def matched(found, expected):
    """Pair each expected root with its nearest unused found root."""
    unused = list(found)
    result = []
    for e in expected:
        if not unused:
            break
        best = min(unused, key=lambda z: abs(z - e))
        result.append(best)
        unused.remove(best)
    return result


FINDERS = {
    "naive": naive_deflate,
    "newton": newton_deflate,
    "halley": halley_deflate,
}

CASES = [
    ("naive", [1.0], 1e-12),
    ("naive", [1.0, 2.0], 1e-12),
    ("naive", [1.0, 2.0, 3.0], 1e-12),
    ("naive", [1.0, 1j, -1j], 1e-8),
    ("naive", [1.0, 2.0, 2.0, 2.0, 3.0], 1e-2),
    ("naive", [0.0, 0.0, 1.0, 2.0, 3.0], 1e-12),
    ("newton", [1.0], 1e-12),
    ("newton", [1.0, 2.0], 1e-12),
    ("newton", [1.0, 2.0, 3.0], 1e-5),
    ("newton", [1.0, 1j, -1j], 1e-4),
    ("newton", [1.0, 2.0, 2.0, 2.0, 3.0], 0.2),
    ("newton", [0.0, 0.0, 1.0, 2.0, 3.0], 1e-5),
    ("halley", [1.0], 1e-12),
    ("halley", [1.0, 2.0], 1e-12),
    ("halley", [1.0, 2.0, 3.0], 1e-7),
    ("halley", [1.0, 1j, -1j], 1e-7),
    ("halley", [1.0, 2.0, 2.0, 2.0, 3.0], 1e-3),
    ("halley", [0.0, 0.0, 1.0, 2.0, 3.0], 1e-7),
]


@pytest.mark.parametrize("name", sorted(FINDERS))
def test_degree_0(name):
    p = Poly.one()
    roots = FINDERS[name](p, 1e-14, 100, [])
    assert roots == []
    assert p.is_one()


@pytest.mark.parametrize("name", sorted(FINDERS))
def test_polynomial_is_fully_deflated(name):
    p = Poly.from_roots([1.0, 2.0, 3.0, 4.0])
    FINDERS[name](p, 1e-14, 100, [])
    assert p.degree() == 0


def test_errors_pass_through():
    p = Poly.from_roots([1.0, 2.0, 3.0])
    with pytest.raises(NoConvergeError):
        naive_deflate(p, 1e-14, 0, [])


def test_guesses_are_handed_out_in_order():
    received = []

    def recording(poly, epsilon, max_iter, guess):
        received.append(guess)
        return naive(poly, epsilon, max_iter, guess)

    expected = [1.0, 2.0, 3.0, 4.0, 5.0]
    p = Poly.from_roots(expected)
    roots = deflate(recording, p, 1e-14, 100, [0.9 + 0.1j, 2.1 + 0.1j])
    assert received[:2] == [0.9 + 0.1j, 2.1 + 0.1j]
    assert all(g is None for g in received[2:])
    assert len(roots) == len(expected)
    assert matched(roots, expected) == pytest.approx(expected, rel=0, abs=1e-6)


def test_trivial_quadratic_needs_no_iteration():
    def never(poly, epsilon, max_iter, guess):
        raise AssertionError("iterative solver called")

    expected = [2.0, -3.0]
    p = Poly.from_roots(expected)
    roots = deflate(never, p, None, None, [])
    assert len(roots) == 2
    assert matched(roots, expected) == pytest.approx(expected, rel=0, abs=1e-12)