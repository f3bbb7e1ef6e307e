# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Tests for the math module."""

from hypothesis import given
from hypothesis import strategies as st

from frequenz.refdate.math import is_close_to_zero


def test_default_tolerance() -> None:
    """Test the default tolerance."""
    assert is_close_to_zero(0.0)
    assert is_close_to_zero(-1e-10)
    assert not is_close_to_zero(1e-8)


def test_non_finite() -> None:
    """Test that non-finite values are never close to zero."""
    assert not is_close_to_zero(float("nan"))
    assert not is_close_to_zero(float("inf"), abs_tol=1e9)


@given(
    st.floats(allow_nan=False, allow_infinity=False),
    st.floats(allow_nan=False, allow_infinity=False, min_value=0.0, max_value=2.0),
)
def test_custom_tolerance(value: float, abs_tol: float) -> None:
    """Test custom tolerances with many values."""
    assert is_close_to_zero(value, abs_tol=abs_tol) == (-abs_tol <= value <= abs_tol)
