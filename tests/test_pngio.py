import pytest
from PIL import Image

from sxpup import pngio


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_png_name_from_pcx():
    assert pngio.png_name_from_pcx("TERRAIN.PCX") == "terrain.png"


def test_png_name_without_dot_is_lowercased():
    assert pngio.png_name_from_pcx("README") == "readme"


def test_png_name_respects_limit():
    assert pngio.png_name_from_pcx("ABCDEFG.PCX", 3) == "abc"


def test_write_read_round_trip(workdir):
    pixels = bytes([10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120,
                    1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 12, 13])
    pngio.write_png("img.png", 3, 2, pixels)
    width, height, data, bpp = pngio.read_png("img.png")
    assert (width, height, bpp) == (3, 2, 8)
    assert data == pixels


def test_written_file_has_png_signature(workdir):
    pngio.write_png("sig.png", 1, 1, bytes([1, 2, 3, 4]))
    assert (workdir / "sig.png").read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    with Image.open(workdir / "sig.png") as img:
        assert img.mode == "RGBA"
        assert img.size == (1, 1)
    width, height, data, bpp = pngio.read_png("sig.png")
    assert (width, height, bpp) == (1, 1, 8)
    assert data == bytes([1, 2, 3, 4])


def test_sixteen_bit_round_trip_keeps_high_bytes(workdir):
    samples = [0x1200, 0x3400, 0x5600, 0xFF00]
    pngio.write_png("deep.png", 1, 1, samples, 16)
    _, _, data, bpp = pngio.read_png("deep.png")
    assert bpp == 8
    assert data == bytes(v >> 8 for v in samples)


def test_read_gray_adds_alpha(workdir):
    Image.new("L", (2, 2), 100).save(workdir / "gray.png")
    width, height, data, _ = pngio.read_png("gray.png")
    assert (width, height) == (2, 2)
    assert data == bytes([100, 100, 100, 255]) * 4


def test_read_from_res_directory(workdir):
    (workdir / "res").mkdir()
    Image.new("RGB", (1, 1), (7, 8, 9)).save(workdir / "res" / "rgb.png")
    _, _, data, _ = pngio.read_png("rgb.png")
    assert data == bytes([7, 8, 9, 255])


def test_read_non_png_raises(workdir):
    (workdir / "fake.png").write_bytes(b"not a png at all")
    with pytest.raises(pngio.PngError):
        pngio.read_png("fake.png")


def test_read_missing_raises(workdir):
    with pytest.raises(pngio.PngError):
        pngio.read_png("missing.png")


def test_write_rejects_bad_depth(workdir):
    with pytest.raises(pngio.PngError):
        pngio.write_png("x.png", 1, 1, bytes(4), 12)


def test_write_rejects_wrong_length(workdir):
    with pytest.raises(pngio.PngError):
        pngio.write_png("x.png", 2, 2, bytes(5))


def test_write_rejects_empty_image(workdir):
    with pytest.raises(pngio.PngError):
        pngio.write_png("x.png", 0, 1, b"")