from __future__ import annotations

"""Main driver for the NFP09 test generator.

Builds one test program per precision by running every gen module's
``generate()`` function in order, writes the programs, and writes a
manifest (``MANIFEST``) so the build system knows which programs exist.
"""

import shutil
import sys
import time
from pathlib import Path
from typing import Collection, Iterable

from .common import Precision
from .gen import dyadic, monadic
from .testprogram import TestProgram

# Monadic first so that call0 is the simplest possible invocation.
_GENERATORS: list[tuple[str, object]] = [
    ("monadic", monadic),
    ("dyadic",  dyadic),
]

OUTPUT_DIR_NAME = "generated"


def program_filename(precision: Precision) -> str:
    return f"nfp09-{precision.name.lower()}-tests.s"


def _clean_output_dir(out_dir: Path, *, verbose: bool = False) -> None:
    """Delete stale programs and the old MANIFEST by dropping *out_dir*.

    A directory with any other name than ``generated`` is left alone and
    reported as an error, so a mistyped ``-o`` cannot wipe a source tree.
    """
    if not out_dir.exists():
        return
    if out_dir.name != OUTPUT_DIR_NAME:
        raise ValueError(
            f"Refusing to remove {out_dir}: not named '{OUTPUT_DIR_NAME}'"
        )

    shutil.rmtree(out_dir)
    if verbose:
        print(f"  cleaned {out_dir.name}/ directory", file=sys.stderr)


def build_program(
    precision: Precision,
    *,
    ops: Collection[str] | None = None,
    trace: bool = False,
    verbose: bool = False,
) -> TestProgram:
    """Return a :class:`TestProgram` holding every case for *precision*.

    *ops* restricts generation to the named operations (``FABS``, ...);
    names are matched case-insensitively.
    """
    if ops is not None:
        ops = {op.upper() for op in ops}
    tp = TestProgram(precision, trace=trace)
    for name, mod in _GENERATORS:
        try:
            n = mod.generate(tp, ops)  # type: ignore[attr-defined]
        except Exception as exc:
            print(f"ERROR generating {name}: {exc}", file=sys.stderr)
            raise
        if verbose:
            print(
                f"  {precision.name.lower():6s} {name:10s}  {n:4d} cases",
                file=sys.stderr,
            )
    return tp


def run(
    out_dir: Path,
    precisions: Iterable[Precision] = (Precision.SINGLE, Precision.DOUBLE),
    *,
    ops: Collection[str] | None = None,
    trace: bool = False,
    verbose: bool = False,
) -> list[str]:
    """Write one program per precision and return the produced files.

    Parameters
    ----------
    out_dir:
        Directory that receives the programs and ``MANIFEST``.  It is
        removed first if it exists (and is named ``generated``).
    precisions:
        Precision modes to generate, one program each.
    ops:
        Restrict generation to these operation names.
    trace:
        Bracket every case with pg09 TRC/PRI instrumentation.
    verbose:
        Print progress to stderr.

    Returns
    -------
    list[str]
        Sorted list of file names (relative to *out_dir*) that were written.
    """
    _clean_output_dir(out_dir, verbose=verbose)

    files: list[str] = []
    total_t0 = time.monotonic()

    for precision in precisions:
        t0 = time.monotonic()
        tp = build_program(precision, ops=ops, trace=trace, verbose=verbose)
        fname = program_filename(precision)
        count = tp.write(out_dir / fname)
        elapsed = time.monotonic() - t0
        if verbose:
            print(
                f"  {fname:24s}  {count:4d} cases  ({elapsed:.2f}s)",
                file=sys.stderr,
            )
        files.append(fname)

    total_elapsed = time.monotonic() - total_t0
    files.sort()

    manifest = out_dir / "MANIFEST"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    manifest.write_text("\n".join(files) + "\n")

    if verbose:
        print(
            f"\nTotal: {len(files)} test programs generated in {total_elapsed:.2f}s",
            file=sys.stderr,
        )
        print(f"Manifest written to {manifest}", file=sys.stderr)

    return files
