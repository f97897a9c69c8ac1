from __future__ import annotations
import math
import warnings
import numpy as np


def identity(x: float) -> float:
    """Return x unchanged. Useful as a coefficient, e.g. A(x) = x."""
    return x


def frequency_from_period(period: float, single_precision: bool = False) -> float:
    """
    Frequency coefficient B = 1 / period.

    Parameters
    ----------
    period : float
        Period-like parameter. Zero maps to an infinity carrying the sign of
        the zero, infinities map to 0.0 and NaN stays NaN.
    single_precision : bool
        Narrow `period` to float32 and take the reciprocal in float32 before
        widening back. Only needed for bit-exact agreement with code that
        stores the period as a single-precision float. Periods outside the
        float32 range narrow to an infinity, giving 0.0.

    Returns
    -------
    float
    """
    if single_precision:
        with np.errstate(divide="ignore", over="ignore"):
            p32 = np.float32(period)
            b = float(np.float32(1.0) / p32)
        if p32 == 0.0:
            warnings.warn(
                f"period={period} is zero; frequency coefficient is {b}",
                RuntimeWarning,
                stacklevel=2,
            )
        return b

    period = float(period)
    if period == 0.0:
        b = math.copysign(math.inf, period)
        warnings.warn(
            f"period={period} is zero; frequency coefficient is {b}",
            RuntimeWarning,
            stacklevel=2,
        )
        return b
    return 1.0 / period
