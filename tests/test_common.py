import math
import struct

import pytest

from nfp09gen.common import (
    Precision,
    bits_to_f32,
    bits_to_f64,
    decode_fpval,
    encode_fpval,
    f32_to_bits,
    f64_to_bits,
    format_fcb_line,
    format_primitive,
    to_precision,
)


@pytest.mark.parametrize(
    "precision, value, expected",
    [
        (Precision.SINGLE, -1.0, "BF800000"),
        (Precision.SINGLE, 1.0, "3F800000"),
        (Precision.SINGLE, -0.0, "80000000"),
        (Precision.SINGLE, math.inf, "7F800000"),
        (Precision.SINGLE, -math.inf, "FF800000"),
        (Precision.SINGLE, math.nan, "7FC00000"),
        (Precision.DOUBLE, -1.0, "BFF0000000000000"),
        (Precision.DOUBLE, 1.0, "3FF0000000000000"),
        (Precision.DOUBLE, -0.0, "8000000000000000"),
        (Precision.DOUBLE, math.inf, "7FF0000000000000"),
        (Precision.DOUBLE, math.nan, "7FF8000000000000"),
    ],
)
def test_encode_known_values(precision, value, expected):
    assert encode_fpval(value, precision) == bytes.fromhex(expected)


@pytest.mark.parametrize("precision", list(Precision))
def test_encode_length(precision):
    for value in (0.0, -1.0, 0.1, 1e30, math.inf, math.nan, 5e-324):
        assert len(encode_fpval(value, precision)) == precision.byte_width


def test_encode_is_big_endian_independent_of_host():
    value = 1.2345678901234567
    assert encode_fpval(value, Precision.DOUBLE) == struct.pack(">d", value)
    assert encode_fpval(value, Precision.SINGLE) == struct.pack(">f", value)


def test_encode_is_idempotent():
    for precision in Precision:
        assert encode_fpval(0.1, precision) == encode_fpval(0.1, precision)


@pytest.mark.parametrize(
    "precision, bits",
    [
        (Precision.SINGLE, 0x3F800000),
        (Precision.SINGLE, 0x80000000),
        (Precision.SINGLE, 0x00000001),
        (Precision.SINGLE, 0x7F7FFFFF),
        (Precision.SINGLE, 0xFF800000),
        (Precision.SINGLE, 0x7FC00000),
        (Precision.SINGLE, 0x7F800001),
        (Precision.SINGLE, 0xFF812345),
        (Precision.SINGLE, 0x7FC12345),
        (Precision.DOUBLE, 0x8000000000000000),
        (Precision.DOUBLE, 0x0000000000000001),
        (Precision.DOUBLE, 0x7FF0000000000000),
        (Precision.DOUBLE, 0x7FF8000000000000),
        (Precision.DOUBLE, 0xFFF8DEADBEEF0001),
    ],
)
def test_decode_encode_preserves_bits(precision, bits):
    data = bits.to_bytes(precision.byte_width, "big")
    assert encode_fpval(decode_fpval(data, precision), precision) == data


def test_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        decode_fpval(b"\x3f\x80\x00", Precision.SINGLE)
    with pytest.raises(ValueError):
        decode_fpval(b"\x3f\x80\x00\x00", Precision.DOUBLE)


def test_single_rounding():
    assert to_precision(0.1, Precision.SINGLE) == bits_to_f32(0x3DCCCCCD)
    assert to_precision(0.1, Precision.DOUBLE) == 0.1


def test_single_overflow_rounds_to_infinity():
    assert f32_to_bits(1e39) == 0x7F800000
    assert f32_to_bits(-1e39) == 0xFF800000
    assert to_precision(1e300, Precision.SINGLE) == math.inf


def test_f64_to_bits_signed_zero():
    assert f64_to_bits(-0.0) == 0x8000000000000000
    assert f64_to_bits(0.0) == 0


def test_precision_properties():
    assert Precision.SINGLE.byte_width == 4
    assert Precision.DOUBLE.byte_width == 8
    assert Precision.SINGLE.ctrl_symbol == "FP_CTRL_SINGLE"
    assert Precision.DOUBLE.ctrl_symbol == "FP_CTRL_DOUBLE"
    assert Precision.DOUBLE.title == "double-precision"


@pytest.mark.parametrize(
    "text, precision",
    [("single", Precision.SINGLE), ("S", Precision.SINGLE),
     ("32", Precision.SINGLE), ("Double", Precision.DOUBLE),
     (" 64 ", Precision.DOUBLE)],
)
def test_precision_parse(text, precision):
    assert Precision.parse(text) is precision


def test_precision_parse_rejects_unknown():
    with pytest.raises(ValueError):
        Precision.parse("half")


def test_format_fcb_line():
    line = format_fcb_line("call0_exp", bytes.fromhex("3F800000"))
    assert line == "call0_exp\tfcb\t$3F,$80,$00,$00"


def test_format_primitive():
    assert format_primitive(0x11FC, "TCMP") == "fdb\t$11fc\t\t; pg09 TCMP"


def test_single_signaling_nan_keeps_payload_through_rounding():
    for bits in (0x7F800001, 0xFF812345, 0xFFBFFFFF):
        assert f32_to_bits(to_precision(bits_to_f32(bits), Precision.SINGLE)) == bits


def test_double_nan_narrowed_to_single_keeps_sign_and_top_payload():
    assert f32_to_bits(bits_to_f64(0xFFF0000020000000)) == 0xFF800001
    # only low payload bits set: still a NaN, not an infinity
    assert f32_to_bits(bits_to_f64(0x7FF0000000000001)) == 0x7FC00000
