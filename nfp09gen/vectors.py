from __future__ import annotations

"""Operand sets for the generated cases.

Every entry starts with the text used in the case comment, followed by the
operand value(s).  Values are plain Python floats; the emitter rounds them
to the program's precision.
"""

import math

from .common import Precision

_INF = math.inf
_NAN = math.nan

# (max finite, min normal, min subnormal)
_LIMITS: dict[Precision, tuple[float, float, float]] = {
    Precision.SINGLE: (3.4028234663852886e38, 1.1754943508222875e-38,
                       1.401298464324817e-45),
    Precision.DOUBLE: (1.7976931348623157e308, 2.2250738585072014e-308,
                       5e-324),
}


def limits(precision: Precision) -> tuple[float, float, float]:
    return _LIMITS[precision]

# ===================================================================
# Monadic:  (name, x)
# ===================================================================

def fp_monadic(precision: Precision) -> list[tuple[str, float]]:
    fmax, fmin_norm, fmin_sub = limits(precision)
    return [
        ("-1.0",    -1.0),
        ("1.0",     1.0),
        ("0.0",     0.0),
        ("-0.0",    -0.0),
        ("-2.5",    -2.5),
        ("-max",    -fmax),
        ("min",     fmin_norm),
        ("-minsub", -fmin_sub),
        ("inf",     _INF),
        ("-inf",    -_INF),
        ("nan",     _NAN),
    ]


def fp_sqrt(precision: Precision) -> list[tuple[str, float]]:
    fmax, _, fmin_sub = limits(precision)
    return [
        ("4.0",    4.0),
        ("2.0",    2.0),
        ("0.25",   0.25),
        ("0.0",    0.0),
        ("-0.0",   -0.0),
        ("max",    fmax),
        ("minsub", fmin_sub),
        ("inf",    _INF),
        ("-1.0",   -1.0),
        ("nan",    _NAN),
    ]

# ===================================================================
# Dyadic:  (name, x, y)
# ===================================================================

def fp_dyadic(precision: Precision) -> list[tuple[str, float, float]]:
    fmax, fmin_norm, _ = limits(precision)
    return [
        ("1.0, 2.0",      1.0, 2.0),
        ("-1.5, 0.25",    -1.5, 0.25),
        ("0.1, 0.2",      0.1, 0.2),
        ("1.0, 3.0",      1.0, 3.0),
        ("0.0, -0.0",     0.0, -0.0),
        ("max, max",      fmax, fmax),
        ("min, 0.5",      fmin_norm, 0.5),
        ("1.0, 0.0",      1.0, 0.0),
        ("-1.0, 0.0",     -1.0, 0.0),
        ("0.0, 0.0",      0.0, 0.0),
        ("inf, -inf",     _INF, -_INF),
        ("inf, 2.0",      _INF, 2.0),
        ("nan, 1.0",      _NAN, 1.0),
    ]
