from __future__ import annotations

"""Generate cases for the two-operand NFP09 operations:
FADD, FSUB, FMUL, FDIV, FREM.
"""

from typing import Collection

from ..emit import emit_dyadic
from ..testprogram import TestProgram
from ..vectors import fp_dyadic

_DYADIC: tuple[str, ...] = ("FADD", "FSUB", "FMUL", "FDIV", "FREM")


def generate(tp: TestProgram, ops: Collection[str] | None = None) -> int:
    """Append all dyadic cases to *tp*; return the number emitted."""
    n = 0
    for op in _DYADIC:
        if ops is not None and op not in ops:
            continue
        for name, x, y in fp_dyadic(tp.precision):
            emit_dyadic(tp, f"{op} {name}", op, x, y)
            n += 1
    return n
