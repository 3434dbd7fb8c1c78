# sxpup

A library of helpers for game resource files: two compression codecs, binary
record reading and writing, file-name and file utilities, 4x4 matrices, PNG
input and output, and the vocabulary of mission trigger scripts.

## Modules

- `sxpup.lzss`: LZSS codec with a 4096-byte ring buffer.
  `compress(data, level=0, limit=None)` returns the packed bytes (`level` has
  no effect; `limit` caps the output size), `decompress(data, size)` returns at
  most `size` bytes, and `max_compressed_size(size)` gives the worst case.
  Failures raise `LzssError`.
- `sxpup.dat`: block stream built on LZSS. Data is cut into 16 KiB blocks,
  each prefixed with a big-endian 16-bit header; blocks that LZSS does not
  shrink are stored as they are, and a zero header ends the stream.
  `compress`, `decompress(data, size)` (returns exactly `size` bytes) and
  `max_compressed_size`; failures raise `DatError`.
- `sxpup.binrw`: little- and big-endian unsigned integers of 1 to 4 bytes,
  raw bytes, fixed-width, length-prefixed and zero-terminated strings on binary
  streams (`read_le`, `write_be`, `read_pascal_string`, `write_cstring`, ...),
  the same on an in-memory `Buffer` (`unpack_le`, `pack_fixed_string`, ...),
  and format strings driving them (`read_format`, `write_format`,
  `Buffer.unpack`, `Buffer.pack`). Errors raise `BinrwError`, whose `code` is
  an `ErrorCode`.
- `sxpup.names`: `is_dos_filename` (upper-case 8.3 names), `align` and
  `padsize`, path splitting (`uppath`, `dirpath`, `pathname`, `name`,
  `nameext`, `ext`), `cut_prefix`, `cut_suffix` and `trim`.
- `sxpup.files`: `extract`, `append_file`, `load_file`, `save_file`,
  `load_block`, `save_block`, `stream_size`, `file_size`, `mkpath`,
  `files_equal`, `blocks_equal`, `scan_until`, and DOS timestamp conversion
  (`dos_to_unix`, `unix_to_dos`, `time_string`).
- `sxpup.mat4`: row-major 4x4 matrices as flat lists of 16 floats: `zero`,
  `identity`, `add`, `sub`, `mul`, `mul_vec`, `tmul_vec`, `transpose`,
  `inverse` (raises `SingularMatrixError`), `from_mat3`, `format_matrix`.
- `sxpup.resfile`: `open_resource` (tries the path, then `res/`, then
  `tmp/`), `load_resource` (the path, then `res/`), and `config_lines`, which
  yields lines with `;` comments and blank lines removed, lower-cased.
- `sxpup.pngio`: `write_png` writes 8- or 16-bit RGBA images, `read_png`
  returns `(width, height, pixels, 8)` as 8-bit RGBA, and
  `png_name_from_pcx` turns `FOO.PCX` into `foo.png`. Errors raise `PngError`.
- `sxpup.triggers`: the enums `GameState`, `Condition`, `Operator`, `Action`
  and `HudElement`, `midi_for_state`, and `parse_condition`,
  `parse_operator`, `parse_action` for reading their names.

## Installing

```
pip install .
```

## Examples

```python
from sxpup import dat, lzss

payload = b"hello hello hello hello" * 100

packed = lzss.compress(payload)
assert lzss.decompress(packed, len(payload)) == payload

archived = dat.compress(payload)
assert dat.decompress(archived, len(payload)) == payload
```

```python
import io
from sxpup.binrw import read_format, write_format

stream = io.BytesIO()
write_format(stream, "l4b2sp", 0x12345678, 0xBEEF, "name")
stream.seek(0)
print(read_format(stream, "l4b2sp"))  # [305419896, 48879, 'name']
```

## What it does not do

This is a library only: it has no command-line program. It compresses and
decompresses individual payloads but does not read or write whole archive
files with a directory of entries. `sxpup.triggers` names the conditions,
operators and actions of mission scripts but does not parse or run trigger
scripts.

## Running the tests

```
pip install .[test]
pytest
```