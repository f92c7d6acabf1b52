from __future__ import annotations

"""Common constants and utility functions for the NFP09 test generator."""

import enum
import math
import struct

# ---------------------------------------------------------------------------
# Target constants
# ---------------------------------------------------------------------------

ABI_INCLUDE: str = "../abi/nfp09-abi.s"
"""ABI definitions (FPOP_*, SIZEOF_FPCB, nfp09_call, ...) for the library."""

ROM_START: int = 0xE000
"""Where the pg09 memory map places the NFP09 ROM image."""

STACK_SIZE: int = 512

# pg09 emulator primitives.  Each is a two-byte illegal opcode that the
# emulator traps and interprets.
PG09_TRC: int = 0x11FB
PG09_TCMP: int = 0x11FC
PG09_EXIT: int = 0x11FD
PG09_PRI: int = 0x11FE

# ---------------------------------------------------------------------------
# Precision mode
# ---------------------------------------------------------------------------

class Precision(enum.Enum):
    """Floating-point format of every value in one generated program.

    The value is the format's width in bits.
    """

    SINGLE = 32
    DOUBLE = 64

    @property
    def bits(self) -> int:
        return self.value

    @property
    def byte_width(self) -> int:
        return self.value // 8

    @property
    def ctrl_symbol(self) -> str:
        """FPCB control-byte constant that selects this format."""
        return _CTRL_SYMBOLS[self]

    @property
    def title(self) -> str:
        return _TITLES[self]

    @classmethod
    def parse(cls, text: str) -> Precision:
        """Map ``single``/``double`` (or ``s``, ``d``, ``32``, ``64``) to a mode."""
        try:
            return _PRECISION_NAMES[text.strip().lower()]
        except KeyError:
            raise ValueError(f"unknown precision: {text!r}") from None


_CTRL_SYMBOLS: dict[Precision, str] = {
    Precision.SINGLE: "FP_CTRL_SINGLE",
    Precision.DOUBLE: "FP_CTRL_DOUBLE",
}

_TITLES: dict[Precision, str] = {
    Precision.SINGLE: "single-precision",
    Precision.DOUBLE: "double-precision",
}

_PRECISION_NAMES: dict[str, Precision] = {
    "single": Precision.SINGLE, "s": Precision.SINGLE, "32": Precision.SINGLE,
    "double": Precision.DOUBLE, "d": Precision.DOUBLE, "64": Precision.DOUBLE,
}

# ---------------------------------------------------------------------------
# IEEE 754 helpers
# ---------------------------------------------------------------------------

def f32_to_bits(f: float) -> int:
    """Convert Python float → IEEE 754 binary32 bit-pattern (uint32).

    Finite values beyond the binary32 range round to a signed infinity,
    as a C ``(float)`` conversion does; ``struct`` would raise instead.
    NaNs keep their sign and the top 23 payload bits; ``struct`` would
    set the quiet bit of a signaling NaN.
    """
    if math.isnan(f):
        b = f64_to_bits(f)
        mant = (b & 0x000F_FFFF_FFFF_FFFF) >> 29
        # payload only in the dropped low bits: keep it a NaN
        return (b >> 63) << 31 | 0x7F80_0000 | (mant or 0x0040_0000)
    try:
        return struct.unpack("<I", struct.pack("<f", f))[0]
    except OverflowError:
        return 0xFF80_0000 if f < 0 else 0x7F80_0000


def bits_to_f32(i: int) -> float:
    """Convert uint32 bit-pattern → Python float (via binary32).

    NaN payloads are carried over bit for bit into the binary64 value.
    """
    i &= 0xFFFF_FFFF
    mant = i & 0x007F_FFFF
    if (i & 0x7F80_0000) == 0x7F80_0000 and mant:
        return bits_to_f64((i >> 31) << 63 | 0x7FF << 52 | mant << 29)
    return struct.unpack("<f", struct.pack("<I", i))[0]


def f64_to_bits(f: float) -> int:
    """Convert Python float → IEEE 754 binary64 bit-pattern (uint64)."""
    return struct.unpack("<Q", struct.pack("<d", f))[0]


def bits_to_f64(i: int) -> float:
    """Convert uint64 bit-pattern → Python float (via binary64)."""
    return struct.unpack("<d", struct.pack("<Q", i & 0xFFFF_FFFF_FFFF_FFFF))[0]


def fp_to_bits(f: float, precision: Precision) -> int:
    if precision is Precision.SINGLE:
        return f32_to_bits(f)
    return f64_to_bits(f)


def bits_to_fp(i: int, precision: Precision) -> float:
    if precision is Precision.SINGLE:
        return bits_to_f32(i)
    return bits_to_f64(i)


def to_precision(f: float, precision: Precision) -> float:
    """Round *f* to the nearest value representable in *precision*."""
    if precision is Precision.SINGLE:
        return bits_to_f32(f32_to_bits(f))
    return f

# ---------------------------------------------------------------------------
# Target encoding (6809 is big-endian)
# ---------------------------------------------------------------------------

def encode_fpval(f: float, precision: Precision) -> bytes:
    """Return the on-target byte image of *f*, most significant byte first.

    This is a bit reinterpretation, not a conversion: NaNs (with their
    payload), infinities and negative zero all encode as-is.  The result
    does not depend on the host's byte order.
    """
    return fp_to_bits(f, precision).to_bytes(precision.byte_width, "big")


def decode_fpval(data: bytes, precision: Precision) -> float:
    """Inverse of :func:`encode_fpval`."""
    if len(data) != precision.byte_width:
        raise ValueError(
            f"{precision.title} value needs {precision.byte_width} bytes, "
            f"got {len(data)}"
        )
    return bits_to_fp(int.from_bytes(data, "big"), precision)

# ---------------------------------------------------------------------------
# Assembly-level formatting helpers
# ---------------------------------------------------------------------------

def format_byte(b: int) -> str:
    """Format one byte the way the 6809 assembler expects: ``$0F``."""
    return f"${b & 0xFF:02X}"


def format_fcb_line(label: str, data: bytes) -> str:
    """Return e.g. ``call0_exp\\tfcb\\t$3F,$80,$00,$00``."""
    return f"{label}\tfcb\t" + ",".join(format_byte(b) for b in data)


def format_primitive(opcode: int, name: str) -> str:
    """Return the (unindented) ``fdb`` line for a pg09 emulator primitive."""
    return f"fdb\t${opcode:04x}\t\t; pg09 {name}"
