import math

import pytest

from msgparts.codec import Kind, decode, encode, infer_kind


def test_stream_bool():
    data = encode(True, Kind.BOOL)
    assert data == b"\x01"
    assert decode(data, Kind.BOOL) is True


def test_bool_false_and_nonzero_byte():
    assert encode(False, Kind.BOOL) == b"\x00"
    assert decode(b"\x07", Kind.BOOL) is True
    assert decode(b"\x00", Kind.BOOL) is False


def test_stream_float():
    data = encode(3.14, Kind.FLOAT)
    assert len(data) == 4
    assert decode(data, Kind.FLOAT) == pytest.approx(3.14, rel=1e-6)


def test_stream_double():
    data = encode(3.14, Kind.DOUBLE)
    assert len(data) == 8
    assert decode(data, Kind.DOUBLE) == 3.14


def test_stream_int8():
    data = encode(-42, Kind.INT8)
    assert data == bytes([0xD6])
    assert decode(data, Kind.INT8) == -42


def test_stream_int16():
    data = encode(512, Kind.INT16)
    assert data == bytes([0x02, 0x00])
    assert decode(data, Kind.INT16) == 512


def test_stream_int32():
    data = encode(-19088744, Kind.INT32)
    assert data == bytes([0xFE, 0xDC, 0xBA, 0x98])
    assert decode(data, Kind.INT32) == -19088744


def test_stream_int64():
    data = encode(1234, Kind.INT64)
    assert data == bytes([0, 0, 0, 0, 0, 0, 0x04, 0xD2])
    assert decode(data, Kind.INT64) == 1234


@pytest.mark.parametrize(
    "value, kind, size",
    [
        (1, Kind.UINT8, 1),
        (12, Kind.UINT16, 2),
        (123, Kind.UINT32, 4),
        (1234, Kind.UINT64, 8),
    ],
)
def test_stream_unsigned(value, kind, size):
    data = encode(value, kind)
    assert len(data) == size
    assert decode(data, kind) == value


def test_string_kind_has_no_fixed_size():
    assert Kind.STRING.size is None
    assert len(encode("ab", Kind.STRING)) == 2
    assert len(encode("abcdef", Kind.STRING)) == 6


def test_string_round_trip():
    data = encode("test part", Kind.STRING)
    assert data == b"test part"
    assert decode(data, Kind.STRING) == "test part"


def test_bytes_round_trip():
    payload = b"\x00\xffabc"
    assert encode(bytearray(payload), Kind.BYTES) == payload
    assert decode(memoryview(payload), Kind.BYTES) == payload


def test_infer_kind():
    assert infer_kind(True) is Kind.BOOL
    assert infer_kind(42) is Kind.INT32
    assert infer_kind(1.5) is Kind.DOUBLE
    assert infer_kind("x") is Kind.STRING
    assert infer_kind(b"x") is Kind.BYTES


def test_infer_kind_rejects_unknown():
    with pytest.raises(TypeError):
        infer_kind(object())


def test_encode_without_kind_uses_inferred():
    assert encode(42) == b"\x00\x00\x00\x2a"
    assert encode("hi") == b"hi"


def test_decode_wrong_size_raises():
    with pytest.raises(ValueError):
        decode(b"\x00\x01", Kind.INT32)
    with pytest.raises(ValueError):
        decode(b"", Kind.BOOL)


def test_encode_out_of_range_raises():
    with pytest.raises(OverflowError):
        encode(256, Kind.UINT8)
    with pytest.raises(OverflowError):
        encode(-1, Kind.UINT32)
    with pytest.raises(OverflowError):
        encode(1e300, Kind.FLOAT)


def test_encode_wrong_type_raises():
    with pytest.raises(TypeError):
        encode(1.5, Kind.INT32)
    with pytest.raises(TypeError):
        encode(5, Kind.STRING)


def test_double_special_values():
    assert decode(encode(math.inf, Kind.DOUBLE), Kind.DOUBLE) == math.inf
    assert math.isnan(decode(encode(math.nan, Kind.DOUBLE), Kind.DOUBLE))


def test_signed_extremes_round_trip():
    assert decode(encode(-(2**63), Kind.INT64), Kind.INT64) == -(2**63)
    assert decode(encode(2**64 - 1, Kind.UINT64), Kind.UINT64) == 2**64 - 1