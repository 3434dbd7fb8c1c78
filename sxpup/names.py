"""Helpers for file names, path pieces, sizes and string trimming."""

from __future__ import annotations

__all__ = [
    "is_dos_filename",
    "align",
    "padsize",
    "uppath",
    "dirpath",
    "pathname",
    "name",
    "nameext",
    "ext",
    "cut_prefix",
    "cut_suffix",
    "trim",
]

PATH_DELIM = "/"

_DOS_NAME_LENGTH = 8
_DOS_EXT_LENGTH = 3
_DOS_ALLOWED_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "-_$#&@!%(){}'`~^" "0123456789"
)


def _allowed_run(text: str) -> int:
    """Return the length of the leading run of DOS-allowed characters."""
    count = 0
    for ch in text:
        if ch not in _DOS_ALLOWED_CHARS:
            break
        count += 1
    return count


def is_dos_filename(filename: str) -> bool:
    """Tell whether ``filename`` is a valid upper-case 8.3 DOS file name."""
    if filename is None:
        raise ValueError("filename is missing")
    length = _allowed_run(filename)
    if length == 0 or length > _DOS_NAME_LENGTH:
        return False
    rest = filename[length:]
    if rest == "":
        return True
    if rest[0] != ".":
        return False
    extension = rest[1:]
    length = _allowed_run(extension)
    if length == 0 or length > _DOS_EXT_LENGTH:
        return False
    return length == len(extension)


def _page(page: int) -> int:
    if page < 0:
        raise ValueError(f"page size {page} is negative")
    # A zero page size is treated as one byte.
    return page or 1


def align(size: int, page: int) -> int:
    """Round ``size`` up to the next multiple of ``page``."""
    page = _page(page)
    rest = size % page
    return size if rest == 0 else size + page - rest


def padsize(size: int, page: int) -> int:
    """Return how many bytes pad ``size`` up to a multiple of ``page``."""
    page = _page(page)
    rest = size % page
    return 0 if rest == 0 else page - rest


def _split(filename: str, delim: str) -> int:
    if filename is None:
        raise ValueError("filename is missing")
    if len(delim) != 1:
        raise ValueError(f"delimiter {delim!r} must be one character")
    return filename.rfind(delim)


def uppath(filename: str, delim: str = PATH_DELIM) -> str:
    """Return the directory part of ``filename`` without the last delimiter."""
    pos = _split(filename, delim)
    return "" if pos < 0 else filename[:pos]


def dirpath(filename: str, delim: str = PATH_DELIM) -> str:
    """Return the directory part of ``filename`` including the last delimiter."""
    pos = _split(filename, delim)
    return "" if pos < 0 else filename[: pos + 1]


def nameext(filename: str, delim: str = PATH_DELIM) -> str:
    """Return the last component of ``filename``."""
    pos = _split(filename, delim)
    return filename[pos + 1 :]


def _ext_start(filename: str, delim: str) -> int:
    """Index of the extension dot in the last component, or -1."""
    base = _split(filename, delim) + 1
    dot = filename.rfind(".", base)
    return dot


def pathname(filename: str, delim: str = PATH_DELIM) -> str:
    """Return ``filename`` without the extension of its last component."""
    dot = _ext_start(filename, delim)
    return filename if dot < 0 else filename[:dot]


def name(filename: str, delim: str = PATH_DELIM) -> str:
    """Return the last component of ``filename`` without its extension."""
    base = nameext(filename, delim)
    dot = base.rfind(".")
    return base if dot < 0 else base[:dot]


def ext(filename: str, delim: str = PATH_DELIM) -> str:
    """Return the extension of the last component, dot included, or ''."""
    dot = _ext_start(filename, delim)
    return "" if dot < 0 else filename[dot:]


def cut_prefix(text: str, prefix: str) -> str:
    """Return ``text`` without ``prefix`` if it starts with it."""
    if text is None or prefix is None:
        raise ValueError("string is missing")
    return text[len(prefix) :] if text.startswith(prefix) else text


def cut_suffix(text: str, suffix: str) -> str:
    """Return ``text`` without ``suffix`` if it ends with it."""
    if text is None or suffix is None:
        raise ValueError("string is missing")
    if suffix and text.endswith(suffix):
        return text[: len(text) - len(suffix)]
    return text


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise ValueError("string is missing")
    return text.strip(chars) if chars else text