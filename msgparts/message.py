"""Multipart messages built from typed or raw parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Union

from .codec import BytesLike, Kind, decode, encode, infer_kind

ReleaseFunction = Callable[[Any], None]


class MessageError(Exception):
    """Raised when a message is used in a way it does not support."""


@dataclass
class _Frame:
    data: Union[bytearray, memoryview]
    releaser: Optional[Callable[[], None]] = None
    is_sent: bool = False

    def release(self) -> None:
        releaser, self.releaser = self.releaser, None
        if releaser is not None:
            releaser()


@dataclass
class _State:
    parts: list[_Frame] = field(default_factory=list)
    cursor: int = 0


class Message:
    """An ordered sequence of binary parts that travel together.

    Parts can be added as typed values (encoded in network byte order),
    as raw bytes (copied), or moved in without copying along with a
    function that is called once the message lets go of them.
    """

    def __init__(self, *args: Any) -> None:
        self._parts: list[_Frame] = []
        self._read_cursor = 0
        self.add(*args)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[bytes]:
        for frame in self._parts:
            yield bytes(frame.data)

    def __enter__(self) -> "Message":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Message({', '.join(repr(p) for p in self)})"

    def _frame(self, part: int) -> _Frame:
        if not 0 <= part < len(self._parts):
            raise MessageError(
                "attempting to request a message part outside the valid range"
            )
        return self._parts[part]

    # Reading

    def size(self, part: int = 0) -> int:
        """Return the size in bytes of the given part."""
        return len(self._frame(part).data)

    def get(self, part: int = 0, kind: Kind | None = None) -> Any:
        """Decode the given part; as a string unless another kind is asked for."""
        frame = self._frame(part)
        return decode(frame.data, Kind.STRING if kind is None else kind)

    def raw_data(self, part: int = 0) -> memoryview:
        """Return a view of the given part's bytes without copying them."""
        return memoryview(self._frame(part).data)

    # Adding parts

    def add(self, *args: Any) -> "Message":
        """Append each value as a new part, encoded by its inferred kind."""
        for value in args:
            self.add_typed(value, infer_kind(value))
        return self

    def add_typed(self, value: Any, kind: Kind | None = None) -> "Message":
        """Append ``value`` encoded as the given kind."""
        self._parts.append(_Frame(bytearray(encode(value, kind))))
        return self

    def add_raw(self, data: BytesLike) -> "Message":
        """Append a copy of ``data`` as a new part."""
        self._parts.append(_Frame(bytearray(data)))
        return self

    def move(self, data: BytesLike, release: ReleaseFunction) -> "Message":
        """Append ``data`` without copying it.

        ``release`` is called with ``data`` once the message no longer
        holds the part.
        """
        self._parts.append(_Frame(memoryview(data), lambda: release(data)))
        return self

    def new_part(self, reserve_size: int | None = None) -> memoryview:
        """Append a zero-filled part of ``reserve_size`` bytes and return a view to fill."""
        if reserve_size is not None and reserve_size < 0:
            raise ValueError("reserve size must not be negative")
        buffer = bytearray(reserve_size or 0)
        self._parts.append(_Frame(buffer))
        return memoryview(buffer)

    def push_front(self, part: Any, kind: Kind | None = None) -> "Message":
        """Insert a part before all others."""
        self._parts.insert(0, _Frame(bytearray(encode(part, kind))))
        return self

    def push_back(self, part: Any, kind: Kind | None = None) -> "Message":
        """Append a part after all others."""
        return self.add_typed(part, kind)

    # Removing parts

    def pop_front(self) -> None:
        """Remove the first part."""
        if not self._parts:
            raise MessageError("cannot pop from an empty message")
        self._parts.pop(0).release()

    def pop_back(self) -> None:
        """Remove the last part."""
        if not self._parts:
            raise MessageError("cannot pop from an empty message")
        self._parts.pop().release()

    def remove(self, part: int) -> None:
        """Remove the part at the given index."""
        self._frame(part)
        self._parts.pop(part).release()

    # Copying and transferring

    def copy(self) -> "Message":
        """Return a new message holding copies of every part's data."""
        duplicate = Message()
        duplicate._parts = [_Frame(bytearray(frame.data)) for frame in self._parts]
        return duplicate

    def take(self) -> "Message":
        """Move all parts and the read cursor into a new message, leaving this one empty."""
        moved = Message()
        moved._parts, self._parts = self._parts, []
        moved._read_cursor, self._read_cursor = self._read_cursor, 0
        return moved

    # Stream-style reading

    def read(self, kind: Kind | None = None) -> Any:
        """Decode the part at the read cursor and advance the cursor."""
        value = self.get(self._read_cursor, kind)
        self._read_cursor += 1
        return value

    def reset_read_cursor(self) -> None:
        """Move the read cursor back to the first part."""
        self._read_cursor = 0

    def read_cursor(self) -> int:
        """Return the index of the next part ``read`` will return."""
        return self._read_cursor

    def remaining(self) -> int:
        """Return how many parts are left after the read cursor."""
        return len(self._parts) - self._read_cursor

    def next(self) -> int:
        """Advance the read cursor by one part and return its new value."""
        self._read_cursor += 1
        return self._read_cursor

    # Send tracking

    def sent(self, part: int) -> None:
        """Mark the given part as handed over for sending."""
        frame = self._frame(part)
        if frame.is_sent:
            raise MessageError(f"part {part} has already been sent")
        frame.is_sent = True

    def is_sent(self, part: int) -> bool:
        """Tell whether the given part has been marked as sent."""
        return self._frame(part).is_sent

    def release(self) -> None:
        """Drop every part, calling the release function of moved parts."""
        parts, self._parts = self._parts, []
        self._read_cursor = 0
        for frame in parts:
            frame.release()