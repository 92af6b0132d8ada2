"""Text forms of JSON numbers: integers of fixed width and floats."""

import math
import operator
import struct
from decimal import Decimal


class EncodeError(ValueError):
    """Raised when a value has no JSON representation."""


_INT_BITS = (8, 16, 32, 64)


def format_integer(value, bits=64, signed=True) -> str:
    """Return the decimal text of an integer of the given width and signedness."""
    if bits not in _INT_BITS:
        raise ValueError(f"unsupported integer width: {bits}")
    number = operator.index(value)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= number <= high:
        kind = "int" if signed else "uint"
        raise EncodeError(f"{number} out of range for {kind}{bits}")
    return str(number)


def _to_float32(x: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _unsupported(value: float) -> EncodeError:
    if math.isnan(value):
        text = "NaN"
    else:
        text = "+Inf" if value > 0 else "-Inf"
    return EncodeError(f"unsupported value: {text}")


def _digits_of(number: Decimal) -> tuple[str, int]:
    _sign, digit_tuple, exponent = number.as_tuple()
    text = "".join(map(str, digit_tuple))
    stripped = text.rstrip("0") or "0"
    return stripped, exponent + len(text) - len(stripped)


def _shortest64(value: float) -> tuple[str, int]:
    return _digits_of(Decimal(repr(value)))


def _shortest32(value: float) -> tuple[str, int]:
    for precision in range(1, 10):
        text = f"{value:.{precision - 1}e}"
        if _to_float32(float(text)) == value:
            return _digits_of(Decimal(text))
    return _digits_of(Decimal(f"{value:.8e}"))


def _render(digits: str, exponent: int, scientific: bool) -> str:
    if scientific:
        power = len(digits) - 1 + exponent
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        sign = "-" if power < 0 else "+"
        return f"{mantissa}e{sign}{abs(power):02d}"
    if exponent >= 0:
        return digits + "0" * exponent
    point = len(digits) + exponent
    if point > 0:
        return digits[:point] + "." + digits[point:]
    return "0." + "0" * (-point) + digits


def _format(value: float, small: float, large: float, shortest) -> str:
    magnitude = abs(value)
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if magnitude == 0:
        return sign + "0"
    scientific = magnitude < small or magnitude >= large
    digits, exponent = shortest(magnitude)
    return sign + _render(digits, exponent, scientific)


_F32_SMALL = _to_float32(1e-6)
_F32_LARGE = _to_float32(1e21)
_F32_LOSSY_LIMIT = _to_float32(float(0x4FFFFFF))
_LOSSY_LIMIT = float(0x4FFFFFF)
_LOSSY_SCALE = 1_000_000


def format_float64(value) -> str:
    """Return the shortest text that reads back as the same double."""
    number = float(value)
    if math.isinf(number) or math.isnan(number):
        raise _unsupported(number)
    return _format(number, 1e-6, 1e21, _shortest64)


def format_float32(value) -> str:
    """Return the shortest text that reads back as the same single-precision float."""
    number = _to_float32(float(value))
    if math.isinf(number) or math.isnan(number):
        raise _unsupported(number)
    return _format(number, _F32_SMALL, _F32_LARGE, _shortest32)


def _lossy(number: float, limit: float, exact) -> str:
    prefix = ""
    if number < 0:
        prefix = "-"
        number = -number
    if number > limit:
        return prefix + exact(number)
    scaled = int(number * _LOSSY_SCALE + 0.5)
    whole, fraction = divmod(scaled, _LOSSY_SCALE)
    if fraction == 0:
        return f"{prefix}{whole}"
    return f"{prefix}{whole}." + f"{fraction:06d}".rstrip("0")


def format_float64_lossy(value) -> str:
    """Return a double rounded to at most six decimal places."""
    number = float(value)
    if math.isinf(number) or math.isnan(number):
        raise _unsupported(number)
    return _lossy(number, _LOSSY_LIMIT, format_float64)


def format_float32_lossy(value) -> str:
    """Return a single-precision float rounded to at most six decimal places."""
    number = _to_float32(float(value))
    if math.isinf(number) or math.isnan(number):
        raise _unsupported(number)
    return _lossy(number, _F32_LOSSY_LIMIT, format_float32)