from __future__ import annotations

"""Generate cases for the single-operand NFP09 operations:
FABS, FNEG, FSQRT.
"""

from typing import Callable, Collection

from ..common import Precision
from ..emit import emit_monadic
from ..testprogram import TestProgram
from ..vectors import fp_monadic, fp_sqrt

# FABS comes first: it is the simplest operation, so call0 exercises the
# calling convention before anything depends on the arithmetic.
_MONADIC: list[tuple[str, Callable[[Precision], list[tuple[str, float]]]]] = [
    ("FABS",  fp_monadic),
    ("FNEG",  fp_monadic),
    ("FSQRT", fp_sqrt),
]


def generate(tp: TestProgram, ops: Collection[str] | None = None) -> int:
    """Append all monadic cases to *tp*; return the number emitted."""
    n = 0
    for op, vectors in _MONADIC:
        if ops is not None and op not in ops:
            continue
        for name, x in vectors(tp.precision):
            emit_monadic(tp, f"{op} {name}", op, x)
            n += 1
    return n
