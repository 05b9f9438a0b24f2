import pytest
from PIL import Image

from arkpaint.colors import COLOR_EMPTY, ColorEntry
from arkpaint.matrix import Matrix
from arkpaint.painting import (
    HEADER_SIZE,
    Painting,
    convert_pnt_to_png,
    height_for_width,
    parse_paintings,
    pnt_header,
    pnt_to_image,
    read_paintings,
    read_pnt,
    width_for_height,
    write_pnt_files,
)

TABLE = [
    ColorEntry("Red", 0xFFFF0000, 65),
    ColorEntry("Blue", 0xFF0000FF, 66),
]


def sign():
    return Painting("Sign", "Sign_Large.pnt", 256, 256, 1.0)


def test_parse_paintings_reads_fields():
    result = parse_paintings(["Sign,Sign_Large.pnt,256,256,1.0\n", "\n"])
    assert result == [sign()]


def test_parse_paintings_missing_fields_are_zero():
    result = parse_paintings(["Flag,Flag.pnt\r\n"])
    assert result == [Painting("Flag", "Flag.pnt", 0, 0, 0.0)]


def test_read_paintings(tmp_path):
    ini = tmp_path / "painting.ini"
    ini.write_text("Sign,Sign_Large.pnt,256,256,1.0\nWide,Wide.pnt,512,256,2.0\n")
    paintings = read_paintings(ini)
    assert [p.name for p in paintings] == ["Sign", "Wide"]
    assert paintings[1].ratio == 2.0


def test_label():
    assert sign().label() == "Sign 256x256"


def test_header_is_fixed_size_and_describes_canvas():
    painting = Painting("Wide", "Wide.pnt", 512, 256, 2.0)
    header = pnt_header(painting)
    assert len(header) == HEADER_SIZE
    assert pnt_to_image(header, TABLE).size == (512, 256)


def test_write_and_read_round_trip(tmp_path):
    matrix = Matrix(2, 3, 65)
    matrix.set(1, 2, 66)
    written = write_pnt_files(matrix, sign(), tmp_path / "art.pnt")
    assert [p.name for p in written] == ["art-0-y0-x0_Sign_Large.pnt"]
    data = read_pnt(written[0])
    assert len(data) == HEADER_SIZE + 256 * 256
    assert data[:HEADER_SIZE] == pnt_header(sign())
    image = pnt_to_image(data, TABLE)
    assert image.getpixel((0, 0)) == (255, 0, 0, 255)
    assert image.getpixel((2, 1)) == (0, 0, 255, 255)
    assert image.getpixel((255, 255)) == (0, 0, 0, 0)
    assert data[-1] == COLOR_EMPTY


def test_write_splits_into_tiles(tmp_path):
    matrix = Matrix(300, 257, 65)
    written = write_pnt_files(matrix, sign(), tmp_path / "big")
    names = sorted(p.name for p in written)
    assert names == sorted(
        f"big-{y * 2 + x}-y{y}-x{x}_Sign_Large.pnt" for y in range(2) for x in range(2)
    )
    assert all(p.exists() for p in written)


def test_write_empty_matrix_writes_nothing(tmp_path):
    assert write_pnt_files(Matrix(), sign(), tmp_path / "x.pnt") == []
    assert list(tmp_path.iterdir()) == []


def test_pnt_to_image_rejects_short_data():
    with pytest.raises(ValueError):
        pnt_to_image(b"\x00" * (HEADER_SIZE - 1), TABLE)


def test_unknown_ids_are_transparent():
    data = pnt_header(sign()) + bytes([99])
    assert pnt_to_image(data, TABLE).getpixel((0, 0)) == (0, 0, 0, 0)


def test_convert_pnt_to_png(tmp_path):
    written = write_pnt_files(Matrix(1, 1, 66), sign(), tmp_path / "pic.pnt")
    png = convert_pnt_to_png(written[0], TABLE)
    assert png.suffix == ".png"
    with Image.open(png) as image:
        assert image.size == (256, 256)
        assert image.convert("RGBA").getpixel((0, 0)) == (0, 0, 255, 255)


def test_convert_rejects_non_pnt(tmp_path):
    path = tmp_path / "image.bin"
    path.write_bytes(pnt_header(sign()))
    with pytest.raises(ValueError):
        convert_pnt_to_png(path, TABLE)


def test_aspect_helpers_are_inverse():
    painting = sign()
    height = height_for_width(painting, 200, 100, 100)
    assert height == 50
    assert width_for_height(painting, 200, 100, height) == 100


def test_aspect_helpers_reject_empty_image():
    with pytest.raises(ValueError):
        height_for_width(sign(), 10, 0, 5)