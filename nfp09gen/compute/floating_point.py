from __future__ import annotations

"""Host reference implementations of the NFP09 operations.

NOTE: Python ``float`` is IEEE 754 binary64.  For binary32 operations the
operands are rounded to binary32, the operation runs in binary64 and the
result is rounded back.  For +, -, *, /, sqrt and remainder binary64 has
more than 2p+2 bits, so this double rounding is innocuous and the binary32
result is correctly rounded.

Python raises where IEEE 754 returns a special value; each helper maps
those exceptions back to the default IEEE result so that NaN and infinity
can be captured as expected values.
"""

import math
from typing import Callable

from ..common import Precision, to_precision

# ===================================================================
# Generic FP helpers
# ===================================================================

def _fp_unaryop(x: float, precision: Precision, op) -> float:
    return to_precision(op(to_precision(x, precision)), precision)


def _fp_binop(x: float, y: float, precision: Precision, op) -> float:
    fx, fy = to_precision(x, precision), to_precision(y, precision)
    return to_precision(op(fx, fy), precision)

# ===================================================================
# Monadic operations
# ===================================================================

def fabs(x: float, precision: Precision) -> float:
    return _fp_unaryop(x, precision, math.fabs)

def fneg(x: float, precision: Precision) -> float:
    return _fp_unaryop(x, precision, lambda v: -v)

def fsqrt(x: float, precision: Precision) -> float:
    def _sqrt(v: float) -> float:
        if math.isnan(v):
            return v
        # sqrt(-0.0) is -0.0; every other negative input is invalid.
        if v < 0.0:
            return float("nan")
        return math.sqrt(v)
    return _fp_unaryop(x, precision, _sqrt)

# ===================================================================
# Dyadic operations
# ===================================================================

def fadd(x: float, y: float, precision: Precision) -> float:
    return _fp_binop(x, y, precision, lambda a, b: a + b)

def fsub(x: float, y: float, precision: Precision) -> float:
    return _fp_binop(x, y, precision, lambda a, b: a - b)

def fmul(x: float, y: float, precision: Precision) -> float:
    return _fp_binop(x, y, precision, lambda a, b: a * b)

def fdiv(x: float, y: float, precision: Precision) -> float:
    def _div(a: float, b: float) -> float:
        try:
            return a / b
        except ZeroDivisionError:
            if math.isnan(a):
                return a
            if a == 0.0:
                return float("nan")
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return _fp_binop(x, y, precision, _div)

def frem(x: float, y: float, precision: Precision) -> float:
    """IEEE 754 remainder: x - y*n, n = x/y rounded to nearest even."""
    def _rem(a: float, b: float) -> float:
        # a NaN operand propagates unchanged, the dividend first
        if math.isnan(a):
            return a
        if math.isnan(b):
            return b
        try:
            return math.remainder(a, b)
        except ValueError:
            # infinite dividend or zero divisor
            return float("nan")
    return _fp_binop(x, y, precision, _rem)

# ===================================================================
# Operation table:  FPOP_<name> -> (arity, reference function)
# ===================================================================

REFERENCE_OPS: dict[str, tuple[int, Callable]] = {
    "FABS":  (1, fabs),
    "FNEG":  (1, fneg),
    "FSQRT": (1, fsqrt),
    "FADD":  (2, fadd),
    "FSUB":  (2, fsub),
    "FMUL":  (2, fmul),
    "FDIV":  (2, fdiv),
    "FREM":  (2, frem),
}
