from __future__ import annotations

"""TestProgram: builder for one self-contained NFP09 test program."""

from pathlib import Path

from .common import (
    ABI_INCLUDE, PG09_EXIT, ROM_START, STACK_SIZE, Precision, format_primitive,
)
from .labels import LabelAllocator, LabelSet

_LICENSE: tuple[str, ...] = (
    "Copyright (c) 2022 Jason R. Thorpe.",
    "All rights reserved.",
    "",
    "Redistribution and use in source and binary forms, with or without",
    "modification, are permitted provided that the following conditions",
    "are met:",
    "1. Redistributions of source code must retain the above copyright",
    "   notice, this list of conditions and the following disclaimer.",
    "2. Redistributions in binary form must reproduce the above copyright",
    "   notice, this list of conditions and the following disclaimer in the",
    "   documentation and/or other materials provided with the distribution.",
    "",
    "THIS SOFTWARE IS PROVIDED BY THE AUTHOR ``AS IS'' AND ANY EXPRESS OR",
    "IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES",
    "OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED.",
    "IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY DIRECT, INDIRECT,",
    "INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,",
    "BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;",
    "LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED",
    "AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,",
    "OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY",
    "OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF",
    "SUCH DAMAGE.",
)


class TestProgram:
    """Accumulates test cases and renders a complete pg09 test program.

    The program is a single stream: header, preamble, every case in the
    order it was emitted, epilogue.  Typical usage::

        tp = TestProgram(Precision.SINGLE)
        emit_monadic(tp, "FABS -1.0", "FABS", -1.0)
        tp.write("generated/nfp09-single-tests.s")
    """

    # Not a pytest test class, despite the name.
    __test__ = False

    def __init__(self, precision: Precision, *, trace: bool = False) -> None:
        self.precision = precision
        self.trace = trace
        self._labels = LabelAllocator()
        self._body: list[str] = []

    # ------------------------------------------------------------------
    # Call-number allocator
    # ------------------------------------------------------------------

    @property
    def case_count(self) -> int:
        return self._labels.count

    def next_call(self) -> LabelSet:
        """Allocate the labels for the next case (call numbers start at 0)."""
        return self._labels.allocate()

    # ------------------------------------------------------------------
    # Body helpers
    # ------------------------------------------------------------------

    def code(self, line: str) -> None:
        """Append one instruction line; fields are tab separated."""
        self._body.append("\t" + line)

    def label(self, name: str) -> None:
        self._body.append(name)

    def comment(self, text: str) -> None:
        self._body.append(f"\t; {text}")

    def blank(self) -> None:
        self._body.append("")

    def raw(self, text: str) -> None:
        """Append raw text (no indentation)."""
        self._body.append(text)

    @property
    def body(self) -> list[str]:
        """Lines emitted so far, without header, preamble or epilogue."""
        return list(self._body)

    # ------------------------------------------------------------------
    # Fixed program parts
    # ------------------------------------------------------------------

    def header_lines(self) -> list[str]:
        lines = [
            ";",
            ";             ********** AUTOMATICALLY GENERATED **********",
            ";             **********   from generate_tests.py  **********",
            ";",
        ]
        lines.extend(f"; {text}" if text else ";" for text in _LICENSE)
        lines.append(";")
        return lines

    def preamble_lines(self) -> list[str]:
        return [
            "",
            f'\tinclude "{ABI_INCLUDE}"',
            "",
            "\t; pg09-specific memory map stuff.",
            f"ROM_START\tequ\t${ROM_START:04X}",
            "",
            "\torg\t$0000",
            "\tsetdp\t$00",
            "",
            "\t;",
            "\t; The reset vector points to $0000, so we jump to the",
            "\t; real entry after our zero page variables.",
            "\t;",
            "\tjmp\ttestprog_start",
            "",
            "nfp09_entryvec",
            "\trmb\t2",
            "fpcb",
            "\trmb\tSIZEOF_FPCB",
            "result",
            "\trmb\tSIZEOF_FPBCD",
            "",
            '\tsection\t"CODE"',
            "testprog_start",
            "\t;",
            "\t; Initialize the stack.",
            "\t;",
            "\tlds\t#stack_top",
            "",
            "\t;",
            "\t; Initialize our NFP09 entry vector.",
            "\t;",
            "\tldx\t#ROM_START",
            "\tnfp09_set_regentry",
            "",
            "\t;",
            "\t; Initialize the FPCB: clear all SIZEOF_FPCB bytes, then",
            "\t; select the precision.",
            "\t;",
            "\tlda\t#SIZEOF_FPCB",
            "\tldx\t#fpcb",
            "1\tclr\t,X+",
            "\tdeca",
            "\tbne\t1B",
            "\tldx\t#fpcb",
            f"\tlda\t#{self.precision.ctrl_symbol}",
            "\tsta\tFPCB_FP_CTRL,X",
            "",
            '\tsection\t"DATA"',
            f'\tfcn\t"NFP09 {self.precision.title} test program"',
            f"\trmb\t{STACK_SIZE}",
            "stack_top",
            "",
        ]

    def epilogue_lines(self) -> list[str]:
        return [
            "",
            '\tsection "CODE"',
            "\t; Exit out of the emulator.",
            "\t" + format_primitive(PG09_EXIT, "EXIT"),
        ]

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        lines: list[str] = []
        lines.extend(self.header_lines())
        lines.extend(self.preamble_lines())
        lines.extend(self._body)
        lines.extend(self.epilogue_lines())
        return "\n".join(lines) + "\n"

    def write(self, filepath: str | Path) -> int:
        """Write the program and return the number of cases it holds."""
        p = Path(filepath)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.render())
        return self.case_count
