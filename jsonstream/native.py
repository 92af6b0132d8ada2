"""Encoders for the basic JSON value kinds: strings, numbers, booleans, bytes."""

from __future__ import annotations

import base64
import enum
from dataclasses import dataclass
from typing import Optional, Union

from .numbers import format_integer
from .stream import Stream


class Kind(enum.Enum):
    """Kinds of values an encoder can be chosen for."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BYTES = "bytes"
    ARRAY = "array"
    SLICE = "slice"
    MAP = "map"
    STRUCT = "struct"
    POINTER = "pointer"
    INTERFACE = "interface"


@dataclass(frozen=True)
class StringCodec:
    """Encodes text as a JSON string."""

    def encode(self, value: str, stream: Stream) -> None:
        stream.write_string(value)

    def is_empty(self, value: str) -> bool:
        return value == ""


@dataclass(frozen=True)
class IntCodec:
    """Encodes integers of a fixed width and signedness."""

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in (8, 16, 32, 64):
            raise ValueError(f"unsupported integer width: {self.bits}")

    def encode(self, value: int, stream: Stream) -> None:
        stream.write_raw(format_integer(value, self.bits, self.signed))

    def is_empty(self, value: int) -> bool:
        return value == 0


@dataclass(frozen=True)
class FloatCodec:
    """Encodes single- or double-precision floats."""

    bits: int

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"unsupported float width: {self.bits}")

    def encode(self, value: float, stream: Stream) -> None:
        if self.bits == 32:
            stream.write_float32(value)
        else:
            stream.write_float64(value)

    def is_empty(self, value: float) -> bool:
        return value == 0


@dataclass(frozen=True)
class BoolCodec:
    """Encodes booleans."""

    def encode(self, value: bool, stream: Stream) -> None:
        stream.write_bool(value)

    def is_empty(self, value: bool) -> bool:
        return not value


@dataclass(frozen=True)
class Base64Codec:
    """Encodes byte sequences as standard base64 strings; ``None`` as null."""

    def encode(self, value: Optional[bytes], stream: Stream) -> None:
        if value is None:
            stream.write_nil()
            return
        encoded = base64.standard_b64encode(bytes(value)).decode("ascii")
        stream.write_raw('"' + encoded + '"')

    def is_empty(self, value: Optional[bytes]) -> bool:
        return value is None or len(value) == 0


NativeCodec = Union[StringCodec, IntCodec, FloatCodec, BoolCodec, Base64Codec]

_NATIVE: dict[Kind, NativeCodec] = {
    Kind.STRING: StringCodec(),
    Kind.BOOL: BoolCodec(),
    Kind.INT: IntCodec(64, True),
    Kind.INT8: IntCodec(8, True),
    Kind.INT16: IntCodec(16, True),
    Kind.INT32: IntCodec(32, True),
    Kind.INT64: IntCodec(64, True),
    Kind.UINT: IntCodec(64, False),
    Kind.UINT8: IntCodec(8, False),
    Kind.UINT16: IntCodec(16, False),
    Kind.UINT32: IntCodec(32, False),
    Kind.UINT64: IntCodec(64, False),
    Kind.UINTPTR: IntCodec(64, False),
    Kind.FLOAT32: FloatCodec(32),
    Kind.FLOAT64: FloatCodec(64),
    Kind.BYTES: Base64Codec(),
}


def encoder_of_native(kind: Kind) -> Optional[NativeCodec]:
    """Return the encoder for a basic kind, or ``None`` for composite kinds."""
    return _NATIVE.get(kind)