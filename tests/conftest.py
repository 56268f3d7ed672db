import pytest

from vecsub import ElementKind, Vector
from vecsub.core.subset import NO_BOUNDS_CHECK_ENV


@pytest.fixture(autouse=True)
def _default_bounds_checking(monkeypatch):
    """Run every test with bounds checking at its default unless a test opts out.

    A developer shell may export the toggle to benchmark unchecked gathers;
    tests that care about the toggle set it explicitly.
    """

    monkeypatch.delenv(NO_BOUNDS_CHECK_ENV, raising=False)


@pytest.fixture
def ints() -> Vector:
    return Vector([10, 20, 30], kind=ElementKind.INTEGER)


@pytest.fixture
def named_strings() -> Vector:
    return Vector(["a", "b", "c"], names=["x", "y", "z"])
