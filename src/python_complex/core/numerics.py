"""
Floating-point helpers that follow IEEE 754 semantics where plain Python
floats would raise.
"""
import numpy as np

__all__ = ["ieee_divide"]


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Returns `numerator / denominator` as a float.

    Division by zero does not raise `ZeroDivisionError`: it returns +/-inf,
    or nan when the numerator is zero or nan as well.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))
