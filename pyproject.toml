[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyroots"
version = "0.1.0"
description = "Polynomials with complex coefficients, special polynomial families and iterative root finders"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "polynomial",
    "roots",
    "newton",
    "halley",
    "aberth-ehrlich",
    "chebyshev",
    "legendre",
    "bessel",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polyroots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
