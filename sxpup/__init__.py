"""LZSS and block-stream codecs, binary record I/O, file and name helpers, 4x4 matrices, PNG I/O and mission trigger vocabulary."""

__version__ = "0.1.0"

__all__ = [
    "binrw",
    "dat",
    "files",
    "lzss",
    "mat4",
    "names",
    "pngio",
    "resfile",
    "triggers",
]