"""Reading and writing RGBA PNG images."""

from __future__ import annotations

import string
import struct
import zlib
from collections.abc import Sequence

from PIL import Image

from .resfile import open_resource

__all__ = ["PngError", "png_name_from_pcx", "write_png", "read_png"]

_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_COLOR_TYPE_RGBA = 6
_COMPRESSION_LEVEL = 1
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class PngError(Exception):
    """Raised when a PNG image cannot be read or written."""


def png_name_from_pcx(filename: str, limit: int | None = None) -> str:
    """Turn a PCX file name into a lower-case name with a ``.png`` extension.

    Only the first ``limit`` characters are considered, if given.  A name
    without a dot is only lower-cased.
    """
    text = filename if limit is None else filename[:limit]
    base, dot, _ = text.partition(".")
    base = base.translate(_ASCII_LOWER)
    return base + ".png" if dot else base


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def _pixel_bytes(pixels: bytes | Sequence[int], count: int, bpp: int) -> bytes:
    try:
        if bpp == 8:
            data = bytes(pixels)
        else:
            values = list(pixels)
            if len(values) != count:
                raise PngError(f"expected {count} samples, got {len(values)}")
            data = struct.pack(f">{count}H", *values)
    except (ValueError, TypeError, struct.error) as exc:
        raise PngError(f"invalid pixel data: {exc}") from exc
    expected = count * bpp // 8
    if len(data) != expected:
        raise PngError(f"expected {expected} bytes of pixels, got {len(data)}")
    return data


def write_png(
    filename: str,
    width: int,
    height: int,
    pixels: bytes | Sequence[int],
    bpp: int = 8,
) -> None:
    """Write an RGBA image of 8 or 16 bits per channel.

    For 8 bits ``pixels`` holds ``4 * width * height`` bytes; for 16 bits it
    holds as many integer samples.
    """
    if bpp not in (8, 16):
        raise PngError(f"unsupported bit depth {bpp}")
    if width <= 0 or height <= 0:
        raise PngError(f"invalid image size {width}x{height}")
    data = _pixel_bytes(pixels, 4 * width * height, bpp)
    row_bytes = 4 * width * bpp // 8
    raw = b"".join(
        b"\0" + data[row * row_bytes : (row + 1) * row_bytes] for row in range(height)
    )
    header = struct.pack(">IIBBBBB", width, height, bpp, _COLOR_TYPE_RGBA, 0, 0, 0)
    content = (
        _SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw, _COMPRESSION_LEVEL))
        + _chunk(b"IEND", b"")
    )
    try:
        with open(filename, "wb") as f:
            f.write(content)
    except OSError as exc:
        raise PngError(f"could not write {filename}: {exc}") from exc


def read_png(filename: str) -> tuple[int, int, bytes, int]:
    """Read a PNG image as 8-bit RGBA.

    The file is looked up like any resource.  Returns ``(width, height,
    pixels, bpp)`` with ``bpp`` always 8; a missing alpha channel is
    filled with 255.
    """
    try:
        f = open_resource(filename)
    except OSError as exc:
        raise PngError(f"could not open {filename}") from exc
    with f:
        if f.read(len(_SIGNATURE)) != _SIGNATURE:
            raise PngError(f"{filename} is not a PNG file")
        f.seek(0)
        try:
            with Image.open(f, formats=["PNG"]) as img:
                rgba = img.convert("RGBA")
        except (OSError, ValueError, SyntaxError) as exc:
            raise PngError(f"could not decode {filename}: {exc}") from exc
    return rgba.width, rgba.height, rgba.tobytes(), 8