"""Polynomials with complex coefficients, special polynomial families and iterative root finders."""

__version__ = "0.1.0"