import pytest

from jsonstream.native import (
    Base64Codec,
    BoolCodec,
    FloatCodec,
    IntCodec,
    Kind,
    StringCodec,
    encoder_of_native,
)
from jsonstream.numbers import EncodeError
from jsonstream.stream import Stream


def encode(codec, value):
    stream = Stream()
    codec.encode(value, stream)
    return stream.buffer()


def test_encode_byte_array_as_base64():
    assert encode(encoder_of_native(Kind.BYTES), b"\x01\x02\x03") == b'"AQID"'


def test_encode_empty_byte_array():
    assert encode(encoder_of_native(Kind.BYTES), b"") == b'""'


def test_encode_nil_byte_array():
    assert encode(encoder_of_native(Kind.BYTES), None) == b"null"


def test_base64_accepts_list_of_ints():
    assert encode(Base64Codec(), [1, 2, 3]) == b'"AQID"'


def test_base64_is_empty():
    codec = Base64Codec()
    assert codec.is_empty(b"")
    assert codec.is_empty(None)
    assert not codec.is_empty(b"\x00")


@pytest.mark.parametrize(
    "kind, expected",
    [
        (Kind.STRING, StringCodec()),
        (Kind.BOOL, BoolCodec()),
        (Kind.INT, IntCodec(64, True)),
        (Kind.INT8, IntCodec(8, True)),
        (Kind.UINT16, IntCodec(16, False)),
        (Kind.UINT, IntCodec(64, False)),
        (Kind.UINTPTR, IntCodec(64, False)),
        (Kind.FLOAT32, FloatCodec(32)),
        (Kind.FLOAT64, FloatCodec(64)),
        (Kind.BYTES, Base64Codec()),
    ],
)
def test_encoder_of_native_kinds(kind, expected):
    assert encoder_of_native(kind) == expected


@pytest.mark.parametrize(
    "kind", [Kind.STRUCT, Kind.SLICE, Kind.MAP, Kind.POINTER, Kind.INTERFACE]
)
def test_composite_kinds_have_no_native_encoder(kind):
    assert encoder_of_native(kind) is None


def test_string_codec():
    codec = StringCodec()
    assert encode(codec, 'say "hi"') == b'"say \\"hi\\""'
    assert codec.is_empty("")
    assert not codec.is_empty("x")


def test_int_codec_encodes_within_range():
    assert encode(IntCodec(8, True), -128) == b"-128"
    assert encode(IntCodec(64, False), 18446744073709551615) == b"18446744073709551615"
    assert encode(encoder_of_native(Kind.INT), 1001) == b"1001"


def test_int_codec_rejects_out_of_range():
    with pytest.raises(EncodeError):
        encode(IntCodec(8, True), 300)
    with pytest.raises(EncodeError):
        encode(encoder_of_native(Kind.UINT), -1)
    with pytest.raises(EncodeError):
        encode(encoder_of_native(Kind.INT), 2**63)


def test_int_codec_rejects_bad_width():
    with pytest.raises(ValueError):
        IntCodec(12, True)


def test_int_codec_is_empty():
    codec = IntCodec(32, True)
    assert codec.is_empty(0)
    assert not codec.is_empty(-1)


def test_float_codec():
    assert encode(FloatCodec(64), 12.3) == b"12.3"
    assert encode(FloatCodec(32), 0.1) == b"0.1"
    assert encode(FloatCodec(64), 1e21) == b"1e+21"
    assert FloatCodec(64).is_empty(0.0)
    assert not FloatCodec(32).is_empty(0.5)


def test_float_codec_rejects_inf_and_nan():
    with pytest.raises(EncodeError):
        encode(FloatCodec(32), float("inf"))
    with pytest.raises(EncodeError):
        encode(FloatCodec(64), float("nan"))


def test_float_codec_rejects_bad_width():
    with pytest.raises(ValueError):
        FloatCodec(16)


def test_bool_codec():
    codec = BoolCodec()
    assert encode(codec, True) == b"true"
    assert encode(codec, False) == b"false"
    assert codec.is_empty(False)
    assert not codec.is_empty(True)