import math
import struct

import pytest

from jsonstream.numbers import (
    EncodeError,
    format_float32,
    format_float32_lossy,
    format_float64,
    format_float64_lossy,
    format_integer,
)


def _f32(x):
    return struct.unpack("<f", struct.pack("<f", x))[0]


def test_lossy_float_marshal():
    assert format_float64_lossy(0.1234567) == "0.123457"
    assert format_float32_lossy(0.1234567) == "0.123457"


@pytest.mark.parametrize(
    "formatter",
    [format_float32, format_float64, format_float32_lossy, format_float64_lossy],
)
@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_inf_and_nan_are_errors(formatter, value):
    with pytest.raises(EncodeError, match="unsupported value"):
        formatter(value)


def test_float32_overflow_is_error():
    with pytest.raises(EncodeError):
        format_float32(1e39)


def test_wrap_float():
    assert format_float64(12.3) == "12.3"


def test_integers():
    assert format_integer(1001, 64, True) == "1001"
    assert format_integer(0xFFFFFFFF, 32, False) == str(0xFFFFFFFF)
    assert format_integer(-128, 8, True) == "-128"
    assert format_integer(2**64 - 1, 64, False) == str(2**64 - 1)


@pytest.mark.parametrize(
    "value, bits, signed",
    [(128, 8, True), (-129, 8, True), (-1, 8, False), (2**64, 64, False), (2**31, 32, True)],
)
def test_integer_out_of_range(value, bits, signed):
    with pytest.raises(EncodeError):
        format_integer(value, bits, signed)


def test_integer_bad_width():
    with pytest.raises(ValueError):
        format_integer(1, 12, True)


@pytest.mark.parametrize(
    "value",
    [1.0, 0.1, 12.3, -1.1, 1.23456789, 1e-7, 3.14159e-300, 1e20, 1e21, 1.7976931348623157e308, 5e-324],
)
def test_float64_round_trip(value):
    assert float(format_float64(value)) == value


@pytest.mark.parametrize("value", [0.1, 12.3, -1.1, 1e-7, 3.4e38, 123456.789, 1.5e-45])
def test_float32_round_trip(value):
    assert _f32(float(format_float32(value))) == _f32(value)


def test_float32_uses_single_precision_shortest():
    assert format_float32(0.1) == "0.1"
    assert format_float64(_f32(0.1)) != "0.1"


def test_notation_thresholds():
    assert format_float64(1e21) == "1e+21"
    assert format_float64(1e20) == "100000000000000000000"
    assert format_float64(1e-7) == "1e-07"
    assert format_float64(1e-6) == "0.000001"
    assert "e" not in format_float32(1e-6)
    assert "e" in format_float32(1e21)


def test_zero_keeps_sign():
    assert format_float64(0.0) == "0"
    assert format_float64(-0.0) == "-0"
    assert format_float32(0.0) == "0"


def test_lossy_trims_trailing_zeros():
    assert format_float64_lossy(1.5) == "1.5"
    assert format_float64_lossy(2.0) == "2"
    assert format_float64_lossy(-0.25) == "-0.25"
    assert format_float64_lossy(0.000001) == "0.000001"


def test_lossy_large_values_fall_back_to_exact():
    assert format_float64_lossy(1e8) == format_float64(1e8)
    assert format_float64_lossy(-1e8) == "-" + format_float64(1e8)
    assert format_float32_lossy(1e8) == format_float32(1e8)
    assert "e" in format_float64_lossy(1e22)