"""Block-wise container for LZSS-compressed data.

The stream is a sequence of blocks, each preceded by a big-endian 16-bit
header.  A header with the top bit set announces a stored block of the
given length; otherwise the block is LZSS-compressed data of the given
length that expands to at most 16 KiB.  A zero header ends the stream.
"""

from __future__ import annotations

from . import lzss

__all__ = ["DatError", "max_compressed_size", "compress", "decompress"]

_BLOCKSIZE = 0x4000
_STORED = 0x8000


class DatError(ValueError):
    """Raised when a block stream cannot be built or read."""


def max_compressed_size(size: int) -> int:
    """Return the worst-case encoded size for ``size`` input bytes."""
    return size + (size // _BLOCKSIZE + 2) * 2


def decompress(data: bytes, size: int) -> bytes:
    """Decode a block stream into a buffer of exactly ``size`` bytes.

    Each compressed block advances the output by a full block (or by the
    space that is left); bytes it does not produce stay zero.
    """
    data = bytes(data)
    if len(data) == 0:
        raise DatError("input is empty")
    if size == 0:
        raise DatError("output size is zero")

    out = bytearray(size)
    soffset = 0
    doffset = 0
    while soffset + 2 <= len(data):
        header = int.from_bytes(data[soffset : soffset + 2], "big")
        soffset += 2
        if header == 0:
            break
        sblock = header & 0x7FFF
        if soffset + sblock > len(data):
            raise DatError("unexpected end of input")
        chunk = data[soffset : soffset + sblock]
        if header & _STORED:
            if doffset + sblock > size:
                raise DatError("unexpected end of output")
            out[doffset : doffset + sblock] = chunk
            doffset += sblock
        else:
            dblock = min(size - doffset, _BLOCKSIZE)
            try:
                decoded = lzss.decompress(chunk, dblock)
            except lzss.LzssError as exc:
                raise DatError(f"block decompression failed: {exc}") from exc
            out[doffset : doffset + len(decoded)] = decoded
            doffset += dblock
        soffset += sblock
    return bytes(out)


def compress(data: bytes, level: int = 0, limit: int | None = None) -> bytes:
    """Encode ``data`` as a block stream.

    Blocks that LZSS does not shrink are stored as they are.  ``limit``
    caps the output size and defaults to :func:`max_compressed_size`.
    """
    data = bytes(data)
    size = len(data)
    if size == 0:
        raise DatError("input is empty")
    dsize = max_compressed_size(size) if limit is None else limit

    out = bytearray()
    for soffset in range(0, size, _BLOCKSIZE):
        block = data[soffset : soffset + _BLOCKSIZE]
        if len(out) + 4 >= dsize:
            raise DatError("unexpected end of output")
        try:
            packed = lzss.compress(block, level, dsize - len(out) - 4)
        except lzss.LzssError:
            packed = None
        if packed is not None and len(packed) < len(block):
            out += len(packed).to_bytes(2, "big")
            out += packed
            continue
        if len(out) + 2 + len(block) > dsize:
            raise DatError("unexpected end of output")
        out += (len(block) | _STORED).to_bytes(2, "big")
        out += block
    if len(out) + 2 > dsize:
        raise DatError("unexpected end of output")
    out += b"\x00\x00"
    return bytes(out)