"""File and stream helpers: copying, loading, comparing and DOS timestamps."""

from __future__ import annotations

import os
import time
from typing import BinaryIO

__all__ = [
    "extract",
    "append_file",
    "load_file",
    "save_file",
    "load_block",
    "save_block",
    "stream_size",
    "file_size",
    "mkpath",
    "files_equal",
    "blocks_equal",
    "scan_until",
    "dos_to_unix",
    "unix_to_dos",
    "time_string",
]

PATH_DELIM = "/"

_BLOCK_SIZE = 4096

_DOS_SECONDS_MASK = 0x1F
_DOS_SECONDS_SCALE = 2
_DOS_MINUTES_MASK = 0x3F
_DOS_MINUTES_SHIFT = 5
_DOS_HOURS_MASK = 0x1F
_DOS_HOURS_SHIFT = 11
_DOS_DAYS_MASK = 0x1F
_DOS_DAYS_SHIFT = 16
_DOS_MONTHS_MASK = 0x0F
_DOS_MONTHS_SHIFT = 21
_DOS_YEARS_MASK = 0x7F
_DOS_YEARS_SHIFT = 25
_DOS_YEARS_OFFSET = 1980


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    if size < 0:
        raise ValueError(f"size {size} is negative")
    data = stream.read(size)
    if data is None or len(data) < size:
        raise EOFError(f"expected {size} bytes, got {0 if data is None else len(data)}")
    return bytes(data)


def extract(dst_filename: str | os.PathLike, src: BinaryIO, size: int) -> None:
    """Copy ``size`` bytes from ``src`` into a newly created file."""
    if src is None:
        raise ValueError("source stream is missing")
    with open(dst_filename, "wb") as dst:
        remaining = size
        while remaining > 0:
            chunk = src.read(min(remaining, _BLOCK_SIZE))
            if not chunk:
                raise EOFError("source stream ended early")
            dst.write(chunk)
            remaining -= len(chunk)


def append_file(dst: BinaryIO, src_filename: str | os.PathLike) -> int:
    """Write the whole content of ``src_filename`` to ``dst``; return its size."""
    if dst is None:
        raise ValueError("destination stream is missing")
    total = 0
    with open(src_filename, "rb") as src:
        while chunk := src.read(_BLOCK_SIZE):
            dst.write(chunk)
            total += len(chunk)
    return total


def load_file(filename: str | os.PathLike) -> bytes:
    """Return the whole content of ``filename``."""
    with open(filename, "rb") as f:
        return f.read()


def save_file(filename: str | os.PathLike, data: bytes) -> None:
    """Create ``filename`` holding ``data``."""
    if data is None:
        raise ValueError("data is missing")
    with open(filename, "wb") as f:
        f.write(bytes(data))


def load_block(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``stream``."""
    if stream is None:
        raise ValueError("stream is missing")
    return _read_exact(stream, size)


def save_block(stream: BinaryIO, data: bytes) -> None:
    """Write all of ``data`` to ``stream``."""
    if stream is None:
        raise ValueError("stream is missing")
    if data is None:
        raise ValueError("data is missing")
    data = bytes(data)
    written = stream.write(data)
    if written is not None and written != len(data):
        raise OSError("short write")


def stream_size(stream: BinaryIO) -> int:
    """Return the size of a seekable stream, keeping its position."""
    if stream is None:
        raise ValueError("stream is missing")
    offset = stream.tell()
    try:
        return stream.seek(0, os.SEEK_END)
    finally:
        stream.seek(offset, os.SEEK_SET)


def file_size(filename: str | os.PathLike) -> int:
    """Return the size of ``filename`` in bytes."""
    with open(filename, "rb") as f:
        return f.seek(0, os.SEEK_END)


def mkpath(path: str, mode: int = 0o777) -> None:
    """Create every directory named before a delimiter in ``path``.

    The component after the last delimiter is not created, so a path
    meant entirely as a directory should end with a delimiter.
    """
    if path is None:
        raise ValueError("path is missing")
    for i, ch in enumerate(path):
        if ch == PATH_DELIM and i > 0:
            try:
                os.mkdir(path[:i], mode)
            except FileExistsError:
                pass


def files_equal(filename0: str | os.PathLike, filename1: str | os.PathLike) -> bool:
    """Tell whether two files have identical content."""
    with open(filename0, "rb") as f0, open(filename1, "rb") as f1:
        if stream_size(f0) != stream_size(f1):
            return False
        while True:
            a = f0.read(_BLOCK_SIZE)
            b = f1.read(_BLOCK_SIZE)
            if a != b:
                return False
            if not a:
                return True


def blocks_equal(stream: BinaryIO, offset0: int, offset1: int, size: int) -> bool:
    """Tell whether two ranges of ``stream`` hold the same bytes.

    The stream position is restored afterwards.  A range running past the
    end of the stream compares unequal.
    """
    if stream is None:
        raise ValueError("stream is missing")
    position = stream.tell()
    try:
        while size > 0:
            count = min(size, _BLOCK_SIZE)
            stream.seek(offset0, os.SEEK_SET)
            a = stream.read(count)
            stream.seek(offset1, os.SEEK_SET)
            b = stream.read(count)
            if len(a) < count or len(b) < count or a != b:
                return False
            offset0 += count
            offset1 += count
            size -= count
        return True
    finally:
        stream.seek(position, os.SEEK_SET)


def scan_until(stream: BinaryIO, terms: str) -> tuple[str, str | None]:
    """Read characters until one of ``terms`` or end of stream.

    Returns the text read and the terminating character, or None at end of
    stream.  NUL bytes are read as spaces.
    """
    if stream is None or terms is None:
        raise ValueError("stream and terminators are required")
    chars: list[str] = []
    while True:
        raw = stream.read(1)
        if not raw:
            return "".join(chars), None
        ch = raw.decode("latin-1")
        if ch == "\0":
            ch = " "
        if ch in terms:
            return "".join(chars), ch
        chars.append(ch)


def dos_to_unix(timestamp: int) -> int:
    """Convert a packed DOS date and time (local time) to a Unix timestamp."""
    seconds = _DOS_SECONDS_SCALE * (timestamp & _DOS_SECONDS_MASK)
    minutes = (timestamp >> _DOS_MINUTES_SHIFT) & _DOS_MINUTES_MASK
    hours = (timestamp >> _DOS_HOURS_SHIFT) & _DOS_HOURS_MASK
    day = (timestamp >> _DOS_DAYS_SHIFT) & _DOS_DAYS_MASK
    month = (timestamp >> _DOS_MONTHS_SHIFT) & _DOS_MONTHS_MASK
    year = ((timestamp >> _DOS_YEARS_SHIFT) & _DOS_YEARS_MASK) + _DOS_YEARS_OFFSET
    return int(time.mktime((year, month, day, hours, minutes, seconds, 0, 0, -1)))


def unix_to_dos(timestamp: int) -> int:
    """Pack a Unix timestamp (as UTC) into a DOS date and time.

    Times before 1980 map to 1 January 1980.
    """
    t = time.gmtime(timestamp)
    if t.tm_year < _DOS_YEARS_OFFSET:
        return (1 << _DOS_MONTHS_SHIFT) | (1 << _DOS_DAYS_SHIFT)
    return (
        ((t.tm_year - _DOS_YEARS_OFFSET) << _DOS_YEARS_SHIFT)
        | (t.tm_mon << _DOS_MONTHS_SHIFT)
        | (t.tm_mday << _DOS_DAYS_SHIFT)
        | (t.tm_hour << _DOS_HOURS_SHIFT)
        | (t.tm_min << _DOS_MINUTES_SHIFT)
        | (t.tm_sec // _DOS_SECONDS_SCALE)
    )


def time_string(timestamp: int) -> str:
    """Format a Unix timestamp as ``YYYYMMDD-HHMMSS`` in UTC."""
    return time.strftime("%Y%m%d-%H%M%S", time.gmtime(timestamp))