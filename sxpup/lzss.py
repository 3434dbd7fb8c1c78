"""LZSS compression with a 4096-byte ring buffer and binary search trees."""

from __future__ import annotations

__all__ = ["LzssError", "max_compressed_size", "compress", "decompress"]

_N = 4096  # ring buffer size
_F = 18  # upper limit for match length
_THRESHOLD = 2  # matches longer than this are encoded as references
_NIL = _N  # marks an unused tree node


class LzssError(ValueError):
    """Raised when data cannot be compressed or decompressed."""


def max_compressed_size(size: int) -> int:
    """Return the worst-case compressed size for ``size`` input bytes."""
    return size + size // 8 + 1


class _Encoder:
    """Ring buffer and match-finding trees used by one compression run."""

    def __init__(self) -> None:
        self.text = bytearray(_N + _F - 1)
        self.lson = [_NIL] * (_N + 257)
        self.rson = [_NIL] * (_N + 257)
        self.dad = [_NIL] * (_N + 257)
        self.match_position = 0
        self.match_length = 0

    def insert(self, r: int) -> None:
        """Insert the string at ``r`` and record the longest match found."""
        text, lson, rson, dad = self.text, self.lson, self.rson, self.dad
        cmp = 1
        p = _N + 1 + text[r]
        rson[r] = _NIL
        lson[r] = _NIL
        self.match_length = 0
        while True:
            if cmp >= 0:
                if rson[p] != _NIL:
                    p = rson[p]
                else:
                    rson[p] = r
                    dad[r] = p
                    return
            else:
                if lson[p] != _NIL:
                    p = lson[p]
                else:
                    lson[p] = r
                    dad[r] = p
                    return
            i = 1
            while i < _F:
                cmp = text[r + i] - text[p + i]
                if cmp != 0:
                    break
                i += 1
            if i > self.match_length:
                self.match_position = p
                self.match_length = i
                if i >= _F:
                    break
        # The new node replaces p, which will be dropped sooner.
        dad[r] = dad[p]
        lson[r] = lson[p]
        rson[r] = rson[p]
        dad[lson[p]] = r
        dad[rson[p]] = r
        if rson[dad[p]] == p:
            rson[dad[p]] = r
        else:
            lson[dad[p]] = r
        dad[p] = _NIL

    def delete(self, p: int) -> None:
        """Remove node ``p`` from its tree."""
        lson, rson, dad = self.lson, self.rson, self.dad
        if dad[p] == _NIL:
            return
        if rson[p] == _NIL:
            q = lson[p]
        elif lson[p] == _NIL:
            q = rson[p]
        else:
            q = lson[p]
            if rson[q] != _NIL:
                while rson[q] != _NIL:
                    q = rson[q]
                rson[dad[q]] = lson[q]
                dad[lson[q]] = dad[q]
                lson[q] = lson[p]
                dad[lson[p]] = q
            rson[q] = rson[p]
            dad[rson[p]] = q
        dad[q] = dad[p]
        if rson[dad[p]] == p:
            rson[dad[p]] = q
        else:
            lson[dad[p]] = q
        dad[p] = _NIL


def compress(data: bytes, level: int = 0, limit: int | None = None) -> bytes:
    """Compress ``data``.

    ``level`` is accepted for interface compatibility and has no effect.
    If ``limit`` is given, an :class:`LzssError` is raised as soon as the
    output would grow beyond that many bytes.
    """
    data = bytes(data)
    size = len(data)
    if size == 0:
        raise LzssError("input is empty")

    enc = _Encoder()
    text = enc.text
    out = bytearray()

    def flush(units: bytearray) -> None:
        if limit is not None and len(out) + len(units) > limit:
            raise LzssError("output is full")
        out.extend(units)

    code_buf = bytearray([0])
    mask = 1
    s = 0
    r = _N - _F
    text[s:r] = b" " * (r - s)

    pos = 0
    length = 0
    while length < _F and pos < size:
        text[r + length] = data[pos]
        pos += 1
        length += 1

    for i in range(1, _F + 1):
        enc.insert(r - i)
    enc.insert(r)

    while True:
        if enc.match_length > length:
            enc.match_length = length
        if enc.match_length <= _THRESHOLD:
            enc.match_length = 1
            code_buf[0] |= mask
            code_buf.append(text[r])
        else:
            position = enc.match_position
            code_buf.append(position & 0xFF)
            code_buf.append(
                ((position >> 4) & 0xF0) | (enc.match_length - (_THRESHOLD + 1))
            )
        mask = (mask << 1) & 0xFF
        if mask == 0:
            flush(code_buf)
            code_buf = bytearray([0])
            mask = 1

        last_match_length = enc.match_length
        i = 0
        while i < last_match_length and pos < size:
            c = data[pos]
            pos += 1
            enc.delete(s)
            text[s] = c
            if s < _F - 1:
                text[s + _N] = c
            s = (s + 1) & (_N - 1)
            r = (r + 1) & (_N - 1)
            enc.insert(r)
            i += 1
        while i < last_match_length:
            i += 1
            enc.delete(s)
            s = (s + 1) & (_N - 1)
            r = (r + 1) & (_N - 1)
            length -= 1
            if length:
                enc.insert(r)
        if length <= 0:
            break

    if len(code_buf) > 1:
        flush(code_buf)
    return bytes(out)


def decompress(data: bytes, size: int) -> bytes:
    """Decompress ``data`` into at most ``size`` bytes.

    A truncated final unit is ignored.  :class:`LzssError` is raised when
    the decoded data would exceed ``size`` bytes.
    """
    data = bytes(data)
    if len(data) == 0:
        raise LzssError("input is empty")
    if size == 0:
        raise LzssError("output size is zero")

    text = bytearray(_N)
    text[: _N - _F] = b" " * (_N - _F)
    r = _N - _F
    out = bytearray()
    src = iter(data)
    remaining = len(data)

    def emit(c: int) -> None:
        nonlocal r
        if len(out) + 1 > size:
            raise LzssError("output is full")
        out.append(c)
        text[r] = c
        r = (r + 1) & (_N - 1)

    flags = 0
    while True:
        flags >>= 1
        if not flags & 0x100:
            if remaining < 1:
                break
            flags = next(src) | 0xFF00
            remaining -= 1
        if flags & 1:
            if remaining < 1:
                break
            emit(next(src))
            remaining -= 1
        else:
            if remaining < 2:
                break
            lo = next(src)
            hi = next(src)
            remaining -= 2
            position = lo | ((hi & 0xF0) << 4)
            count = (hi & 0x0F) + _THRESHOLD + 1
            for k in range(count):
                emit(text[(position + k) & (_N - 1)])
    return bytes(out)