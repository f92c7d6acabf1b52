#!/usr/bin/env python3
from __future__ import annotations

"""Entry point for generating the NFP09 test programs.

Usage:
    python generate_tests.py [-v] [-p single|double]... [-o OUTPUT_DIR]
    python generate_tests.py -p single --stdout

OUTPUT_DIR defaults to ``generated/`` next to this script.
"""

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate NFP09 floating-point test programs for pg09."
    )
    parser.add_argument(
        "-p", "--precision",
        action="append",
        choices=("single", "double"),
        help="Precision to generate (repeatable; default: both)",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=str(Path(__file__).resolve().parent / "generated"),
        help="Output directory (default: generated/ next to this script)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write a single program to standard output instead",
    )
    parser.add_argument(
        "--op",
        action="append",
        metavar="NAME",
        help="Only generate cases for this operation, e.g. FABS (repeatable)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Bracket every case with pg09 TRC/PRI instrumentation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information",
    )
    args = parser.parse_args(argv)

    # Import the generator package.
    from nfp09gen.common import Precision
    from nfp09gen.compute.floating_point import REFERENCE_OPS
    from nfp09gen.main import build_program, run

    names = args.precision or ["single", "double"]
    precisions = [Precision.parse(n) for n in dict.fromkeys(names)]

    ops = None
    if args.op:
        ops = {op.upper() for op in args.op}
        unknown = sorted(ops - REFERENCE_OPS.keys())
        if unknown:
            parser.error(f"unknown operation(s): {', '.join(unknown)}")

    if args.stdout:
        if len(precisions) != 1:
            parser.error("--stdout needs exactly one --precision")
        tp = build_program(
            precisions[0], ops=ops, trace=args.trace, verbose=args.verbose
        )
        sys.stdout.write(tp.render())
        return

    files = run(
        Path(args.output_dir).resolve(), precisions,
        ops=ops, trace=args.trace, verbose=args.verbose,
    )
    if not args.verbose:
        print(f"{len(files)} test programs generated.")


if __name__ == "__main__":
    main()
