"""Locating resource files and reading simple line-based configuration."""

from __future__ import annotations

import os
import string
from collections.abc import Iterable, Iterator
from typing import BinaryIO

__all__ = ["open_resource", "load_resource", "config_lines"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _candidates(path: str, prefixes: Iterable[str]) -> Iterator[str]:
    yield path
    for prefix in prefixes:
        yield os.path.join(prefix, path)


def open_resource(path: str) -> BinaryIO:
    """Open ``path`` for binary reading, trying it, then ``res/``, then ``tmp/``."""
    for candidate in _candidates(path, ("res", "tmp")):
        try:
            return open(candidate, "rb")
        except OSError:
            continue
    raise FileNotFoundError(f"could not open {path}")


def load_resource(path: str) -> bytes:
    """Return the content of ``path``, looked up directly or under ``res/``."""
    for candidate in _candidates(path, ("res",)):
        try:
            with open(candidate, "rb") as f:
                return f.read()
        except OSError:
            continue
    raise FileNotFoundError(f"could not open {path}")


def config_lines(stream: Iterable[str | bytes]) -> Iterator[str]:
    """Yield the meaningful lines of a configuration stream.

    Blank lines and lines starting with ``;`` are skipped, leading
    whitespace is dropped, anything from a ``;`` on is cut off and the
    rest is lower-cased.
    """
    for raw in stream:
        if isinstance(raw, (bytes, bytearray)):
            raw = bytes(raw).decode("latin-1")
        line = raw.lstrip()
        for end in ("\r", "\n"):
            line = line.split(end, 1)[0]
        if not line or line.startswith(";"):
            continue
        line = line.split(";", 1)[0]
        yield line.translate(_ASCII_LOWER)