"""Encoding of typed values into message part payloads.

Numbers are stored in network (big-endian) byte order, booleans as a
single byte, and strings as their UTF-8 bytes with no terminator.
"""

from __future__ import annotations

import enum
import struct
from typing import Any, Union

BytesLike = Union[bytes, bytearray, memoryview]


class Kind(enum.Enum):
    """The type a message part is encoded as."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"
    BYTES = "bytes"

    @property
    def size(self) -> int | None:
        """Fixed payload size in bytes, or None for variable-length kinds."""
        fmt = _FORMATS.get(self)
        return struct.calcsize(fmt) if fmt is not None else None


_FORMATS: dict[Kind, str] = {
    Kind.INT8: ">b",
    Kind.INT16: ">h",
    Kind.INT32: ">i",
    Kind.INT64: ">q",
    Kind.UINT8: ">B",
    Kind.UINT16: ">H",
    Kind.UINT32: ">I",
    Kind.UINT64: ">Q",
    Kind.FLOAT: ">f",
    Kind.DOUBLE: ">d",
}

_INTEGER_KINDS = frozenset(
    {
        Kind.INT8,
        Kind.INT16,
        Kind.INT32,
        Kind.INT64,
        Kind.UINT8,
        Kind.UINT16,
        Kind.UINT32,
        Kind.UINT64,
    }
)


def infer_kind(value: Any) -> Kind:
    """Choose the kind a plain Python value is encoded as by default."""
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT32
    if isinstance(value, float):
        return Kind.DOUBLE
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    raise TypeError(f"cannot encode a value of type {type(value).__name__}")


def encode(value: Any, kind: Kind | None = None) -> bytes:
    """Encode ``value`` as the payload of one part of the given kind."""
    if kind is None:
        kind = infer_kind(value)
    kind = Kind(kind)

    if kind is Kind.BOOL:
        return b"\x01" if value else b"\x00"
    if kind is Kind.STRING:
        if isinstance(value, str):
            return value.encode("utf-8", "surrogateescape")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"expected str for {kind.value}, got {type(value).__name__}")
    if kind is Kind.BYTES:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"expected bytes for {kind.value}, got {type(value).__name__}")

    fmt = _FORMATS[kind]
    if kind in _INTEGER_KINDS:
        if isinstance(value, float) or not isinstance(value, int):
            raise TypeError(
                f"expected int for {kind.value}, got {type(value).__name__}"
            )
        try:
            return struct.pack(fmt, int(value))
        except struct.error as exc:
            raise OverflowError(f"{value} does not fit in {kind.value}") from exc

    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise TypeError(f"expected float for {kind.value}, got {type(value).__name__}")
    try:
        return struct.pack(fmt, float(value))
    except (struct.error, OverflowError) as exc:
        raise OverflowError(f"{value} does not fit in {kind.value}") from exc


def decode(data: BytesLike, kind: Kind) -> Any:
    """Decode a part payload of the given kind back into a Python value."""
    kind = Kind(kind)
    raw = bytes(data)

    if kind is Kind.STRING:
        return raw.decode("utf-8", "surrogateescape")
    if kind is Kind.BYTES:
        return raw

    expected = 1 if kind is Kind.BOOL else kind.size
    if len(raw) != expected:
        raise ValueError(
            f"part of {len(raw)} bytes cannot be read as {kind.value} "
            f"({expected} bytes)"
        )
    if kind is Kind.BOOL:
        return raw[0] != 0
    (value,) = struct.unpack(_FORMATS[kind], raw)
    return value