import pytest

from sxpup import names

PATHS = [
    "a/b/c.txt",
    "file.tar.gz",
    "noext",
    "dir.d/file",
    "/abs/path/x.y",
    "trailing/",
    ".hidden",
    "",
]


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("README", True),
        ("FILE.TXT", True),
        ("ABCDEFGH.XYZ", True),
        ("A.B", True),
        ("ABCDEFGHI", False),
        ("FILE.TEXT", False),
        ("FILE.", False),
        (".TXT", False),
        ("file.txt", False),
        ("", False),
        ("A.B.C", False),
        ("A B", False),
    ],
)
def test_is_dos_filename(filename, expected):
    assert names.is_dos_filename(filename) is expected


@pytest.mark.parametrize("size", [0, 1, 3, 4, 5, 4095, 4096, 4097, 10000])
@pytest.mark.parametrize("page", [1, 4, 512, 4096])
def test_align_invariants(size, page):
    aligned = names.align(size, page)
    assert aligned % page == 0
    assert size <= aligned < size + page
    assert aligned - size == names.padsize(size, page)


def test_align_exact_multiple_unchanged():
    assert names.align(4096, 4096) == 4096
    assert names.padsize(4096, 4096) == 0


def test_zero_page_behaves_like_one():
    assert names.align(7, 0) == 7
    assert names.padsize(7, 0) == 0


def test_negative_page_rejected():
    with pytest.raises(ValueError):
        names.align(3, -1)


@pytest.mark.parametrize("filename", PATHS)
def test_path_pieces_recombine(filename):
    assert names.dirpath(filename) + names.nameext(filename) == filename
    assert names.pathname(filename) + names.ext(filename) == filename
    assert names.name(filename) + names.ext(filename) == names.nameext(filename)
    assert names.dirpath(filename).startswith(names.uppath(filename))


def test_path_pieces_values():
    assert names.uppath("a/b/c.txt") == "a/b"
    assert names.dirpath("a/b/c.txt") == "a/b/"
    assert names.name("a/b/c.txt") == "c"
    assert names.ext("a/b/c.txt") == ".txt"
    assert names.pathname("a/b/c.txt") == "a/b/c"


def test_dot_in_directory_is_not_extension():
    assert names.ext("dir.d/file") == ""
    assert names.pathname("dir.d/file") == "dir.d/file"
    assert names.name("dir.d/file") == "file"


def test_no_delimiter():
    assert names.uppath("file.tar.gz") == ""
    assert names.nameext("file.tar.gz") == "file.tar.gz"
    assert names.ext("file.tar.gz") == ".gz"


def test_custom_delimiter():
    assert names.nameext("C:\\GAME\\DATA.PUP", "\\") == "DATA.PUP"
    assert names.uppath("C:\\GAME\\DATA.PUP", "\\") == "C:\\GAME"


def test_bad_delimiter_rejected():
    with pytest.raises(ValueError):
        names.uppath("a/b", "//")


def test_cut_prefix_and_suffix():
    assert names.cut_prefix("res/file.pcx", "res/") == "file.pcx"
    assert names.cut_prefix("file.pcx", "res/") == "file.pcx"
    assert names.cut_suffix("file.pcx", ".pcx") == "file"
    assert names.cut_suffix("file.pcx", ".png") == "file.pcx"
    assert names.cut_suffix("file.pcx", "") == "file.pcx"


@pytest.mark.parametrize("text", ["abc", "", "x.y.z"])
def test_cut_roundtrip(text):
    assert names.cut_prefix("pre" + text, "pre") == text
    assert names.cut_suffix(text + "suf", "suf") == text


def test_trim():
    assert names.trim("  \tword \r\n", " \t\r\n") == "word"
    assert names.trim("xxinnerxx", "x") == "inner"
    assert names.trim("  keep  ", "") == "  keep  "
    assert names.trim("xxxx", "x") == ""


def test_missing_string_rejected():
    with pytest.raises(ValueError):
        names.trim(None, " ")
    with pytest.raises(ValueError):
        names.cut_prefix("abc", None)