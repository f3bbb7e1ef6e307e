# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Floating point helpers."""

import math


def is_close_to_zero(value: float, abs_tol: float = 1e-9) -> bool:
    """Check if a floating point value is close to zero.

    Relative tolerances are meaningless around zero, so only an absolute
    tolerance is used. See https://peps.python.org/pep-0485/#behavior-near-zero

    Args:
        value: the floating point value to check.
        abs_tol: the maximum distance from zero that is still considered zero.

    Returns:
        whether the value is within `abs_tol` of zero.
    """
    return math.isclose(value, 0.0, abs_tol=abs_tol)
