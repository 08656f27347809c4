# polyroots

Polynomials with complex coefficients, a few classical polynomial families,
and a set of iterative root finders. The package is plain Python and depends
only on the standard library.

## Installation

```
pip install polyroots
```

## Polynomials

`polyroots.poly.Poly` stores its coefficients as Python `complex` values in
ascending order of degree. `Poly([1, 2, 3])` is `1 + 2x + 3x²`. Trailing zero
coefficients are dropped. The zero polynomial keeps a single zero
coefficient.

```python
from polyroots.poly import Poly

p = Poly.from_roots([1, 2, 3])      # monic (x - 1)(x - 2)(x - 3)
p.degree()                          # 3
p.eval(2)                           # 0j (Horner's scheme)
p.eval_multiple([1, 2])             # list of values
p.diff()                            # first derivative
p.coeffs                            # copy of the coefficients
Poly.term(2.0, 3)                   # 2x³
Poly.one()                          # the constant 1
```

You can add, subtract and multiply polynomials with each other and with
numbers. Negation works too. Polynomials support `==`, `len()`, indexing,
and iteration over their coefficients.

Some methods change the polynomial in place:

- `make_monic()` divides every coefficient by the leading one.
- `zero_roots(epsilon)` factors out roots at zero and returns them.
- `linear_roots()` and `quadratic_roots()` solve degree 1 and degree 2
  polynomials. Only the leading coefficient is left afterwards.
- `deflate_composite(root)` divides out the factor `(x - root)`.

Each method raises `ValueError` if you call it on a polynomial of the wrong
degree.

### Special polynomials

```python
Poly.cheby1(3)          # Chebyshev, first kind: 4x³ - 3x
Poly.legendre(3)        # Legendre: 2.5x³ - 1.5x
Poly.bessel(4)          # Bessel polynomial
Poly.reverse_bessel(4)  # reverse Bessel polynomial
```

`Poly.cheby` does the same as `Poly.cheby1` and emits a
`DeprecationWarning`. The module also provides `factorial(n)`, which returns
the exact integer, and `bessel_coeff(n, k)`, the coefficient of the k-th term
of the n-th Bessel polynomial. A coefficient too large for a float comes back
as infinity.

## Finding roots

Every root finder takes a polynomial, a tolerance `epsilon`, an optional
iteration limit `max_iter`, and initial guesses. A root counts as converged
when `|p(z)|²` is at most `epsilon`.

When a finder fails to converge it raises
`polyroots.single_root.NoConvergeError`. Its `roots` attribute holds the best
guesses the finder reached.

### All roots by deflation

`polyroots.all_roots` provides `newton_deflate`, `halley_deflate` and
`naive_deflate`. Each one finds one root, divides it out, and repeats. Zero,
linear and quadratic factors are solved directly. Your guesses are used one
at a time. When they run out, each later search starts from
`initial_guess_smallest`.

```python
from polyroots.poly import Poly
from polyroots.all_roots import newton_deflate

p = Poly.from_roots([1, 2, 3])
roots = newton_deflate(p, 1e-14, 100, [])
```

The polynomial is deflated in place. Afterwards only its leading coefficient
is left, so a monic polynomial ends as the constant 1. If you leave
`epsilon` out, it defaults to `polyroots.scalar.tiny_safe()`.

`naive_deflate` uses the plain Newton iteration. It is fragile, and it raises
`NoConvergeError` when the derivative vanishes.

### All roots at once: Aberth–Ehrlich

`polyroots.aberth_ehrlich.aberth_ehrlich` needs distinct guesses, at least
one per root. It ignores any extra guesses. It raises `ValueError` if there
are too few guesses or if two of them are the same.

`polyroots.initial_guess.initial_guesses_circle` places `count` guesses in
the annulus that holds the roots. This requires a monic polynomial of degree
2 or more.

- `bias` sets the radius: 0 uses the lower bound and 1 the upper bound.
- `perturbation` adds seeded randomness: 0 gives exactly equidistant points.

```python
from polyroots.poly import Poly
from polyroots.initial_guess import initial_guesses_circle
from polyroots.aberth_ehrlich import aberth_ehrlich

p = Poly.from_roots([1, 2, 3])
guesses = initial_guesses_circle(p, 0.5, 1, 0.5, 3)
roots = aberth_ehrlich(p, 1e-14, 100, guesses)
```

The polynomial is made monic in place. The method does poorly near zero, so
factor out zero roots first, for example with `zero_roots`.

### Several roots from several starting points

`polyroots.many_roots` provides `naive_parallel`, `newton_parallel` and
`halley_parallel`. Each runs a single-root method once for each guess and
collects every root it finds. If you leave `epsilon` out, it defaults to 0.

```python
from polyroots.poly import Poly
from polyroots.many_roots import newton_parallel

p = Poly.from_roots([1, 2, 3])
roots = newton_parallel(p, 1e-14, 100, [0.9 + 0.1j, 3.1 - 0.1j])
```

### Single-root methods

There are three single-root methods:

- `polyroots.naive.naive` uses the plain Newton iteration.
- `polyroots.newton.newton` uses Madsen's modified Newton method.
- `polyroots.halley.halley` uses a modified Halley's method.

Each returns a pair. The first item is the list of roots found, usually one.
The second is a count: the number of iterations for `naive`, and the number
of evaluations for the other two.

```python
from polyroots.newton import newton

found, evaluations = newton(p, 1e-14, 100, None)
```

If the initial guess is `None`, the search starts from
`polyroots.initial_guess.initial_guess_smallest(poly)`. This is an estimate
close to the root of smallest magnitude.

### Related functions

`polyroots.initial_guess` also provides these helpers:

- `upper_bound(poly)` is Deutsch's bound on the roots of a monic polynomial.
- `lower_bound(poly)` gives the radius of a disk around the origin that holds
  no roots.
- `cross_2d(o, a, b)` gives the z component of the cross product of OA and
  OB.
- `upper_convex_envelope(points)` gives the upper envelope of the convex hull
  of a set of points.

`polyroots.single_root` holds the building blocks used by the single-root
methods:

- `LazyDerivatives` computes derivatives only when they are requested.
- `stopping_criterion_garwick` is a stopping test.
- `multiplicity_lagouanelle` estimates the multiplicity of a root.
- `line_search_accelerate` and `line_search_decelerate` adjust the step
  length.

`polyroots.newton` also exposes its step rule `compute_delta` and its
convergence test `check_will_converge`.

## Numerical safety helpers

`polyroots.scalar` provides three thresholds:

- `tiny_safe()` is the smallest value that is safe to take a reciprocal of.
- `small_safe()` is the smallest value that is safe to divide by.
- `large_safe()` is the largest value that is safe to divide.

It also has the predicates `is_tiny(x)`, `is_small(x)` and `is_large(x)`,
plus `recip(x)`. All of these accept real and complex numbers.

## Limits

This is a library only: there is no command-line tool. All arithmetic uses
Python floats and complex numbers, so everything is computed in double
precision. No other number types are supported.