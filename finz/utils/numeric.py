from __future__ import annotations

import numpy as np

# Float arithmetic with IEEE-754 semantics: x/0 gives inf or nan and huge
# powers give inf, where plain Python floats would raise ZeroDivisionError or
# OverflowError.


def growth(rate: float, periods: float) -> float:
    """(1 + rate) ** periods"""
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(1.0) + np.float64(rate), np.float64(periods)))


def div(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.true_divide(np.float64(a), np.float64(b)))
