"""Reading and writing little/big-endian integers and strings.

Works on binary streams (anything with ``read``/``write``) and on
fixed-size in-memory buffers.  Format strings describe a sequence of
fields; each field is a type letter followed by a length specification:

``l``
    little-endian unsigned integer of 1 to 4 bytes
``b``
    big-endian unsigned integer of 1 to 4 bytes
``s``
    string: ``sz`` zero-terminated, ``sp`` length-prefixed, ``s<digits>``,
    ``sn`` or ``sN`` fixed width
``c``
    raw bytes
``z``
    zero bytes (writing only)

The length is given by decimal digits, or by ``n``/``N``, which take it from
the next positional argument.  Any other character after the type letter is
skipped and the previous length is used again.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from functools import partial
from typing import Any, BinaryIO

__all__ = [
    "ErrorCode",
    "BinrwError",
    "Buffer",
    "read_le",
    "read_be",
    "write_le",
    "write_be",
    "read_bytes",
    "write_bytes",
    "read_fixed_string",
    "write_fixed_string",
    "read_pascal_string",
    "write_pascal_string",
    "read_cstring",
    "write_cstring",
    "read_format",
    "write_format",
]

_MAX_VALUE = (0x000000FF, 0x0000FFFF, 0x00FFFFFF, 0xFFFFFFFF)
_DIGITS = "0123456789"


class ErrorCode(enum.IntEnum):
    """Kinds of failure reported by the reading and writing routines."""

    OK = 0
    NOMEM_ERROR = 1
    READ_ERROR = 2
    WRITE_ERROR = 3
    ARG_ERROR = 4
    FORMAT_ERROR = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.OK: "Ok.",
    ErrorCode.READ_ERROR: "Read error.",
    ErrorCode.WRITE_ERROR: "Write error.",
    ErrorCode.NOMEM_ERROR: "Not enough memory.",
    ErrorCode.ARG_ERROR: "Wrong argument.",
    ErrorCode.FORMAT_ERROR: "Wrong format string.",
}


class BinrwError(Exception):
    """Raised when a field cannot be read or written."""

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = ErrorCode(code)
        self.detail = detail
        text = f"{detail}: {self.code.message}" if detail else self.code.message
        super().__init__(text)


def _check_length(length: int) -> None:
    if not isinstance(length, int) or not 1 <= length <= 4:
        raise BinrwError(ErrorCode.ARG_ERROR, f"integer length {length!r}")


def _check_value(value: int, length: int) -> None:
    _check_length(length)
    if not isinstance(value, int) or value < 0 or value > _MAX_VALUE[length - 1]:
        raise BinrwError(ErrorCode.ARG_ERROR, f"value {value!r} for {length} bytes")


def _to_bytes(text: str | bytes | None) -> bytes:
    """Encode ``text`` as a C string would hold it: up to the first NUL."""
    if text is None:
        raise BinrwError(ErrorCode.ARG_ERROR, "string is missing")
    if isinstance(text, str):
        try:
            raw = text.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise BinrwError(ErrorCode.ARG_ERROR, "string is not latin-1") from exc
    else:
        raw = bytes(text)
    return raw.split(b"\0", 1)[0]


def _to_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


def _read_exact(stream: BinaryIO, length: int) -> bytes:
    if length < 0:
        raise BinrwError(ErrorCode.ARG_ERROR, f"length {length}")
    try:
        data = stream.read(length)
    except OSError as exc:
        raise BinrwError(ErrorCode.READ_ERROR, str(exc)) from exc
    if data is None or len(data) < length:
        raise BinrwError(ErrorCode.READ_ERROR, "unexpected end of stream")
    return bytes(data)


def _write_all(stream: BinaryIO, data: bytes) -> None:
    try:
        written = stream.write(data)
    except (OSError, ValueError) as exc:
        raise BinrwError(ErrorCode.WRITE_ERROR, str(exc)) from exc
    if written is not None and written != len(data):
        raise BinrwError(ErrorCode.WRITE_ERROR, "short write")


# ---------------------------------------------------------------- streams


def read_le(stream: BinaryIO, length: int) -> int:
    """Read a little-endian unsigned integer of 1 to 4 bytes."""
    _check_length(length)
    return int.from_bytes(_read_exact(stream, length), "little")


def read_be(stream: BinaryIO, length: int) -> int:
    """Read a big-endian unsigned integer of 1 to 4 bytes."""
    _check_length(length)
    return int.from_bytes(_read_exact(stream, length), "big")


def write_le(stream: BinaryIO, value: int, length: int) -> None:
    """Write ``value`` little-endian in ``length`` bytes; it must fit."""
    _check_value(value, length)
    _write_all(stream, value.to_bytes(length, "little"))


def write_be(stream: BinaryIO, value: int, length: int) -> None:
    """Write ``value`` big-endian in ``length`` bytes; it must fit."""
    _check_value(value, length)
    _write_all(stream, value.to_bytes(length, "big"))


def read_bytes(stream: BinaryIO, length: int) -> bytes:
    """Read exactly ``length`` raw bytes."""
    return _read_exact(stream, length)


def _raw_field(data: bytes | None, length: int | None) -> bytes:
    if data is None:
        if length is None:
            raise BinrwError(ErrorCode.ARG_ERROR, "length is missing")
        return bytes(length)
    data = bytes(data)
    if length is None:
        return data
    if len(data) < length:
        raise BinrwError(ErrorCode.ARG_ERROR, "data shorter than length")
    return data[:length]


def write_bytes(stream: BinaryIO, data: bytes | None, length: int | None = None) -> None:
    """Write ``length`` bytes of ``data``, or zero bytes if ``data`` is None."""
    _write_all(stream, _raw_field(data, length))


def read_fixed_string(stream: BinaryIO, length: int) -> str:
    """Read a string stored in a field of ``length`` bytes."""
    return _to_text(_read_exact(stream, length))


def write_fixed_string(stream: BinaryIO, text: str | bytes, length: int) -> None:
    """Write ``text`` into a zero-padded field of ``length`` bytes."""
    raw = _to_bytes(text)
    if len(raw) > length:
        raise BinrwError(ErrorCode.ARG_ERROR, "string too long")
    _write_all(stream, raw + bytes(length - len(raw)))


def read_pascal_string(stream: BinaryIO) -> str:
    """Read a string preceded by a one-byte length."""
    length = _read_exact(stream, 1)[0]
    return read_fixed_string(stream, length)


def write_pascal_string(stream: BinaryIO, text: str | bytes) -> None:
    """Write ``text`` preceded by its one-byte length (at most 255)."""
    raw = _to_bytes(text)
    if len(raw) > 0xFF:
        raise BinrwError(ErrorCode.ARG_ERROR, "string too long")
    _write_all(stream, bytes([len(raw)]) + raw)


def read_cstring(stream: BinaryIO) -> str:
    """Read a zero-terminated string."""
    chars = bytearray()
    while True:
        ch = _read_exact(stream, 1)
        if ch == b"\0":
            return chars.decode("latin-1")
        chars += ch


def write_cstring(stream: BinaryIO, text: str | bytes) -> None:
    """Write ``text`` followed by a terminating zero byte."""
    _write_all(stream, _to_bytes(text) + b"\0")


# ---------------------------------------------------------------- formats


def _fields(fmt: str, args: tuple, writing: bool) -> Iterator[tuple[str, str, int, Any]]:
    """Yield ``(kind, modifier, length, value)`` for each field of ``fmt``."""
    if fmt is None:
        raise BinrwError(ErrorCode.ARG_ERROR, "format is missing")
    pending = iter(args)

    def take(what: str) -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise BinrwError(ErrorCode.ARG_ERROR, f"missing {what}") from None

    kinds = "lbscz" if writing else "lbsc"
    length = 0
    i = 0
    while i < len(fmt):
        kind = fmt[i]
        if kind not in kinds:
            raise BinrwError(ErrorCode.FORMAT_ERROR, fmt[i:])
        value = take("value") if writing and kind != "z" else None
        mod = fmt[i + 1] if i + 1 < len(fmt) else ""
        if mod == "":
            raise BinrwError(ErrorCode.FORMAT_ERROR, fmt[i:])
        if mod in _DIGITS:
            j = i + 1
            while j < len(fmt) and fmt[j] in _DIGITS:
                j += 1
            length = int(fmt[i + 1 : j])
            following = j
        elif mod in "nN":
            length = take("length")
            following = i + 2
        else:
            following = i + 2
        if kind == "s" and not (mod in "zpnN" or mod in _DIGITS):
            raise BinrwError(ErrorCode.FORMAT_ERROR, fmt[i:])
        yield kind, mod, length, value
        i = following


def _decode(
    fmt: str,
    args: tuple,
    le: Callable[[int], int],
    be: Callable[[int], int],
    raw: Callable[[int], bytes],
    fixed: Callable[[int], str],
    pascal: Callable[[], str],
    cstring: Callable[[], str],
) -> list:
    values: list = []
    for kind, mod, length, _ in _fields(fmt, args, writing=False):
        if kind == "l":
            values.append(le(length))
        elif kind == "b":
            values.append(be(length))
        elif kind == "c":
            values.append(raw(length))
        elif mod == "z":
            values.append(cstring())
        elif mod == "p":
            values.append(pascal())
        else:
            values.append(fixed(length))
    return values


def _encode(
    fmt: str,
    args: tuple,
    le: Callable[[int, int], None],
    be: Callable[[int, int], None],
    raw: Callable[[bytes | None, int], None],
    fixed: Callable[[Any, int], None],
    pascal: Callable[[Any], None],
    cstring: Callable[[Any], None],
) -> None:
    for kind, mod, length, value in _fields(fmt, args, writing=True):
        if kind == "l":
            le(value, length)
        elif kind == "b":
            be(value, length)
        elif kind == "c":
            raw(value, length)
        elif kind == "z":
            raw(None, length)
        elif mod == "z":
            cstring(value)
        elif mod == "p":
            pascal(value)
        else:
            fixed(value, length)


def read_format(stream: BinaryIO, fmt: str, *args: int) -> list:
    """Read the fields described by ``fmt`` and return their values.

    ``args`` supply the lengths for ``n`` and ``N`` specifications.
    """
    return _decode(
        fmt,
        args,
        partial(read_le, stream),
        partial(read_be, stream),
        partial(read_bytes, stream),
        partial(read_fixed_string, stream),
        partial(read_pascal_string, stream),
        partial(read_cstring, stream),
    )


def write_format(stream: BinaryIO, fmt: str, *args: Any) -> None:
    """Write the fields described by ``fmt``.

    Each field except ``z`` takes its value from ``args``; an ``n`` or ``N``
    length is taken from the argument that follows the value.
    """
    _encode(
        fmt,
        args,
        partial(write_le, stream),
        partial(write_be, stream),
        partial(write_bytes, stream),
        partial(write_fixed_string, stream),
        partial(write_pascal_string, stream),
        partial(write_cstring, stream),
    )


# ---------------------------------------------------------------- buffers


class Buffer:
    """A fixed-size byte buffer with a read/write position."""

    def __init__(self, data: bytes | bytearray | int, offset: int = 0) -> None:
        if isinstance(data, int):
            data = bytearray(data)
        self.data = data if isinstance(data, bytearray) else bytearray(data)
        if not 0 <= offset <= len(self.data):
            raise BinrwError(ErrorCode.ARG_ERROR, f"offset {offset}")
        self.offset = offset

    @property
    def size(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def _take(self, length: int) -> bytes:
        if length < 0:
            raise BinrwError(ErrorCode.ARG_ERROR, f"length {length}")
        if self.offset + length > self.size:
            raise BinrwError(ErrorCode.READ_ERROR, "unexpected end of buffer")
        chunk = bytes(self.data[self.offset : self.offset + length])
        self.offset += length
        return chunk

    def _room(self, length: int) -> None:
        if self.offset + length > self.size:
            raise BinrwError(ErrorCode.WRITE_ERROR, "buffer is full")

    def _put(self, chunk: bytes) -> None:
        self._room(len(chunk))
        self.data[self.offset : self.offset + len(chunk)] = chunk
        self.offset += len(chunk)

    def unpack_le(self, length: int) -> int:
        """Take a little-endian unsigned integer of 1 to 4 bytes."""
        _check_length(length)
        return int.from_bytes(self._take(length), "little")

    def unpack_be(self, length: int) -> int:
        """Take a big-endian unsigned integer of 1 to 4 bytes."""
        _check_length(length)
        return int.from_bytes(self._take(length), "big")

    def pack_le(self, value: int, length: int) -> None:
        """Put ``value`` little-endian in ``length`` bytes."""
        _check_value(value, length)
        self._put(value.to_bytes(length, "little"))

    def pack_be(self, value: int, length: int) -> None:
        """Put ``value`` big-endian in ``length`` bytes."""
        _check_value(value, length)
        self._put(value.to_bytes(length, "big"))

    def unpack_bytes(self, length: int) -> bytes:
        """Take ``length`` raw bytes."""
        return self._take(length)

    def pack_bytes(self, data: bytes | None, length: int | None = None) -> None:
        """Put ``length`` bytes of ``data``, or zeros if ``data`` is None."""
        self._put(_raw_field(data, length))

    def unpack_fixed_string(self, length: int) -> str:
        """Take a string stored in a field of ``length`` bytes."""
        return _to_text(self._take(length))

    def pack_fixed_string(self, text: str | bytes, length: int) -> None:
        """Put ``text`` into a zero-padded field of ``length`` bytes."""
        if text is None:
            raise BinrwError(ErrorCode.ARG_ERROR, "string is missing")
        self._room(length)
        raw = _to_bytes(text)
        if len(raw) > length:
            raise BinrwError(ErrorCode.ARG_ERROR, "string too long")
        self._put(raw + bytes(length - len(raw)))

    def unpack_pascal_string(self) -> str:
        """Take a string preceded by a one-byte length."""
        if self.offset + 1 > self.size:
            raise BinrwError(ErrorCode.READ_ERROR, "unexpected end of buffer")
        length = self.data[self.offset]
        if self.offset + 1 + length > self.size:
            raise BinrwError(ErrorCode.READ_ERROR, "unexpected end of buffer")
        self.offset += 1
        return _to_text(self._take(length))

    def pack_pascal_string(self, text: str | bytes) -> None:
        """Put ``text`` preceded by its one-byte length (at most 255)."""
        raw = _to_bytes(text)
        if len(raw) > 0xFF:
            raise BinrwError(ErrorCode.ARG_ERROR, "string too long")
        self._put(bytes([len(raw)]) + raw)

    def unpack_cstring(self) -> str:
        """Take a zero-terminated string."""
        end = self.data.find(b"\0", self.offset)
        if end < 0:
            raise BinrwError(ErrorCode.READ_ERROR, "unterminated string")
        text = self.data[self.offset : end].decode("latin-1")
        self.offset = end + 1
        return text

    def pack_cstring(self, text: str | bytes) -> None:
        """Put ``text`` followed by a terminating zero byte."""
        self._put(_to_bytes(text) + b"\0")

    def unpack(self, fmt: str, *args: int) -> list:
        """Take the fields described by ``fmt`` and return their values."""
        return _decode(
            fmt,
            args,
            self.unpack_le,
            self.unpack_be,
            self.unpack_bytes,
            self.unpack_fixed_string,
            self.unpack_pascal_string,
            self.unpack_cstring,
        )

    def pack(self, fmt: str, *args: Any) -> None:
        """Put the fields described by ``fmt``, taking values from ``args``."""
        _encode(
            fmt,
            args,
            self.pack_le,
            self.pack_be,
            self.pack_bytes,
            self.pack_fixed_string,
            self.pack_pascal_string,
            self.pack_cstring,
        )