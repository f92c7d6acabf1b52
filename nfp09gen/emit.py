from __future__ import annotations

"""Assembly emission helpers – add one test case (or one emulator
primitive) to a :class:`TestProgram`.

Calling convention used for every NFP09 invocation:
  U  – first operand (dyadic operations only)
  Y  – second operand
  D  – FPCB
  X  – result buffer

Each case is self-contained: it only refers to its own ``callN_*`` labels
and to the fixed symbols ``fpcb``, ``result``, ``nfp09_call`` and
``FPOP_*``.
"""

from .common import (
    PG09_PRI, PG09_TCMP, PG09_TRC,
    encode_fpval, format_fcb_line, format_primitive, to_precision,
)
from .compute.floating_point import REFERENCE_OPS
from .labels import LabelSet
from .testprogram import TestProgram

# ===================================================================
# Sections and pg09 emulator primitives
# ===================================================================

def emit_section(tp: TestProgram, section: str) -> None:
    tp.code(f'section "{section}"')


def emit_tcmp(tp: TestProgram, exp_label: str, length: int) -> None:
    """Compare *length* bytes at X (the result) against *exp_label*.

    The pg09 "test compare" primitive takes X = buffer 1, Y = buffer 2 and
    A = length.  X already points to the result.
    """
    tp.code(f"ldy\t#{exp_label}")
    tp.code(f"lda\t#{length}")
    tp.code(format_primitive(PG09_TCMP, "TCMP"))


def emit_trc(tp: TestProgram, flag: int) -> None:
    """Turn emulator instruction tracing on (non-zero) or off (0)."""
    tp.code(format_primitive(PG09_TRC, "TRC"))
    tp.code(f"fcb\t{flag & 0xFF}")


def emit_pri(tp: TestProgram) -> None:
    """Dump the CPU registers."""
    tp.code(format_primitive(PG09_PRI, "PRI"))


def emit_fpval(tp: TestProgram, value: float, lbl: str) -> None:
    tp.raw(format_fcb_line(lbl, encode_fpval(value, tp.precision)))

# ===================================================================
# Test cases
# ===================================================================

def _expected(tp: TestProgram, op: str, args: tuple[float, ...],
              expected: float | None) -> float:
    if expected is not None:
        return to_precision(expected, tp.precision)
    try:
        arity, cfn = REFERENCE_OPS[op]
    except KeyError:
        raise ValueError(
            f"no reference operation for FPOP_{op}; pass expected explicitly"
        ) from None
    if arity != len(args):
        raise ValueError(
            f"FPOP_{op} takes {arity} operand(s), got {len(args)}"
        )
    return cfn(*args, tp.precision)


def _emit_call(tp: TestProgram, labels: LabelSet, comment: str, op: str,
               *, dyadic: bool) -> None:
    emit_section(tp, "CODE")
    tp.label(labels.start)
    tp.comment(comment)
    if tp.trace:
        emit_trc(tp, 1)
    if dyadic:
        tp.code(f"ldu\t#{labels.arg1}")
    tp.code(f"ldy\t#{labels.arg2}")
    tp.code("ldd\t#fpcb")
    tp.code("ldx\t#result")
    tp.code(f"nfp09_call FPOP_{op}")
    if tp.trace:
        emit_pri(tp)
        emit_trc(tp, 0)
    emit_tcmp(tp, labels.exp, tp.precision.byte_width)
    tp.code(f"export {labels.end}")
    tp.label(labels.end)
    tp.blank()


def emit_dyadic(
    tp: TestProgram,
    comment: str,
    op: str,
    arg1: float,
    arg2: float,
    expected: float | None = None,
) -> float:
    """Emit one two-operand case and return its expected result.

    When *expected* is None it is computed with the host reference
    operation registered for *op*.
    """
    arg1 = to_precision(arg1, tp.precision)
    arg2 = to_precision(arg2, tp.precision)
    exp = _expected(tp, op, (arg1, arg2), expected)
    labels = tp.next_call()

    _emit_call(tp, labels, comment, op, dyadic=True)

    emit_section(tp, "DATA")
    emit_fpval(tp, arg1, labels.arg1)
    emit_fpval(tp, arg2, labels.arg2)
    emit_fpval(tp, exp, labels.exp)
    tp.blank()
    return exp


def emit_monadic(
    tp: TestProgram,
    comment: str,
    op: str,
    arg2: float,
    expected: float | None = None,
) -> float:
    """Emit one single-operand case and return its expected result.

    The operand goes in the second-operand slot (Y); U is left alone.
    """
    arg2 = to_precision(arg2, tp.precision)
    exp = _expected(tp, op, (arg2,), expected)
    labels = tp.next_call()

    _emit_call(tp, labels, comment, op, dyadic=False)

    emit_section(tp, "DATA")
    emit_fpval(tp, arg2, labels.arg2)
    emit_fpval(tp, exp, labels.exp)
    tp.blank()
    return exp
