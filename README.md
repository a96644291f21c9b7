# msgparts

A small library for building and reading multipart messages. A message is an
ordered list of byte parts. Each part is raw bytes, a UTF-8 string, or a typed
scalar encoded in network (big-endian) byte order.

## Installing

```
pip install msgparts
```

## Building a message

```python
from msgparts.message import Message
from msgparts.codec import Kind

msg = Message("hello", 42)          # a string part and a 32-bit integer part
msg.add_typed(3.14, Kind.DOUBLE)    # an 8-byte IEEE double
msg.add_raw(b"\x00\x01")            # raw bytes, copied as they are
msg.push_front("header")            # insert at the front

len(msg)        # 5
msg.size(0)     # 6
msg.get(0)      # "header"
```

Without an explicit kind, `str` values become UTF-8 parts, `bytes`-like values
become raw parts, `bool` becomes one byte (`0` or `1`), `int` becomes a signed
32-bit integer and `float` becomes a double. Pass a `Kind` to `add_typed`,
`push_front` or `push_back` to choose another width or signedness. Values of
any other type raise `TypeError`; integers that do not fit the chosen kind
raise `OverflowError`.

`add`, `add_typed`, `add_raw`, `push_front`, `push_back` and `move` return the
message, so calls can be chained.

`new_part(reserve_size)` appends a zero-filled part of the given size and
returns a writable `memoryview` of it to fill in place.

## Reading a message

Read parts in order with the read cursor:

```python
msg.reset_read_cursor()
msg.read()                # "header"
msg.read()                # "hello"
msg.read(Kind.INT32)      # 42
msg.read_cursor()         # 3
msg.remaining()           # 2
```

`next()` advances the cursor without reading. Any part can also be read
directly with `msg.get(index, kind)`; without a kind it is decoded as a string.
`raw_data(index)` returns a `memoryview` of a part's bytes, and iterating over
a message yields each part as `bytes`.

Asking for a part outside the message raises `MessageError`. Decoding a
fixed-size kind from a part of the wrong length raises `ValueError`.

## Removing parts

`pop_front()`, `pop_back()` and `remove(index)` drop a single part;
`pop_front` and `pop_back` raise `MessageError` on an empty message.
`release()` drops every part and resets the read cursor.

## Encoding single values

`msgparts.codec` encodes and decodes one value at a time:

```python
from msgparts.codec import encode, decode, infer_kind, Kind

encode(512, Kind.INT16)                  # b"\x02\x00"
decode(b"\xfe\xdc\xba\x98", Kind.INT32)  # -19088744
infer_kind(2.5)                          # Kind.DOUBLE
Kind.UINT64.size                         # 8
```

`Kind.size` is `None` for the variable-length kinds `STRING` and `BYTES`.

## Ownership

`Message.copy()` makes a new message with copies of every part's data.
`Message.take()` moves all parts and the read cursor into a new message and
leaves the original empty.

`Message.move(data, release)` adds a part without copying it. `release` is
called with `data` once the message lets go of that part: when the part is
removed with `pop_front`, `pop_back` or `remove`, or when `release()` is
called. A message can be used as a context manager, which calls `release()`
on exit:

```python
with Message() as msg:
    msg.move(buffer, on_release)
    ...
# on_release(buffer) has been called here
```

## Send tracking

`sent(index)` marks a part as handed over for sending and raises
`MessageError` if it was already marked; `is_sent(index)` reports the mark.

## What this package does not do

It has no sockets, connections or transport of any kind. Messages are built
and read in memory only; `sent` and `is_sent` merely record a flag and do not
send anything.