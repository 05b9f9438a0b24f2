"""Painting templates and the tiled ``.pnt`` canvas file format."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from PIL import Image

from .colors import COLOR_EMPTY, ColorEntry
from .matrix import Matrix

HEADER_SIZE = 20
HEADER_PIXEL_PER_UNIT = 256
DEFAULT_PAINTINGS_PATH = "data/painting.ini"

_EMPTY_PIXEL = (0, 0, 0, 0)


@dataclass
class Painting:
    """A paintable surface: its name, save-file suffix, pixel size and aspect ratio."""

    name: str
    save_file_name: str
    width: int
    height: int
    ratio: float

    def label(self) -> str:
        """Human-readable description such as ``Sign 256x256``."""
        return f"{self.name} {self.width}x{self.height}"


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _parse_line(line: str) -> Painting:
    fields = line.rstrip("\r\n").split(",")
    fields += [""] * (5 - len(fields))
    name, save_name, width, height, ratio = fields[:5]
    return Painting(name, save_name, _to_int(width), _to_int(height), _to_float(ratio))


def parse_paintings(lines: Iterable[str]) -> list[Painting]:
    """Parse ``name,save-file,width,height,ratio`` lines; blank lines are skipped.

    Missing or non-numeric fields become empty strings or zero.
    """
    return [_parse_line(line) for line in lines if line.strip()]


def read_paintings(path: str | PathLike[str]) -> list[Painting]:
    """Read the painting definitions file."""
    with open(path, encoding="utf-8") as handle:
        return parse_paintings(handle)


def pnt_header(painting: Painting) -> bytes:
    """Build the fixed-size header of a ``.pnt`` file for ``painting``."""
    header = bytearray(HEADER_SIZE)
    header[5] = (painting.width // HEADER_PIXEL_PER_UNIT) & 0xFF
    header[9] = (painting.height // HEADER_PIXEL_PER_UNIT) & 0xFF
    header[18] = (header[5] * header[9]) & 0xFF
    return bytes(header)


def write_pnt_files(
    matrix: Matrix, painting: Painting, path: str | PathLike[str]
) -> list[Path]:
    """Split a matrix of colour ids into painting-sized tiles and write each one.

    Tiles are written next to ``path``; cells beyond the matrix are padded
    with the empty colour. Returns the paths written, row by row. An empty
    matrix writes nothing.
    """
    if matrix.rows == 0 or matrix.cols == 0:
        return []
    if painting.width <= 0 or painting.height <= 0:
        raise ValueError(f"painting {painting.name!r} has no area")

    target = Path(path).absolute()
    name = target.name
    stem = name[:-4] if ".pnt" in name else name
    header = pnt_header(painting)
    across = (matrix.cols - 1) // painting.width + 1
    down = (matrix.rows - 1) // painting.height + 1

    written = []
    for y in range(down):
        for x in range(across):
            out = target.parent / (
                f"{stem}-{y * across + x}-y{y}-x{x}_{painting.save_file_name}"
            )
            body = bytearray(header)
            for row in range(painting.height * y, painting.height * (y + 1)):
                body.extend(
                    matrix.get(row, col) & 0xFF
                    if row < matrix.rows and col < matrix.cols
                    else COLOR_EMPTY
                    for col in range(painting.width * x, painting.width * (x + 1))
                )
            out.write_bytes(body)
            written.append(out)
    return written


def read_pnt(path: str | PathLike[str]) -> bytes:
    """Return the raw contents of a ``.pnt`` file."""
    return Path(path).read_bytes()


def pnt_to_image(data: bytes, table: Sequence[ColorEntry]) -> Image.Image:
    """Render ``.pnt`` data as an RGBA image using the ids of ``table``.

    Ids not found in the table, and pixels missing from the data, become
    fully transparent.
    """
    if len(data) < HEADER_SIZE:
        raise ValueError("data is shorter than a .pnt header")
    width = data[5] * HEADER_PIXEL_PER_UNIT
    height = data[9] * HEADER_PIXEL_PER_UNIT
    if width == 0 or height == 0:
        raise ValueError("the .pnt header describes an empty canvas")

    colors: dict[int, tuple[int, int, int, int]] = {}
    for entry in table:
        colors.setdefault(entry.id, (*entry.rgb(), (entry.argb >> 24) & 0xFF))

    count = width * height
    pixels = [colors.get(pid, _EMPTY_PIXEL) for pid in data[HEADER_SIZE:HEADER_SIZE + count]]
    pixels.extend([_EMPTY_PIXEL] * (count - len(pixels)))
    image = Image.new("RGBA", (width, height))
    image.putdata(pixels)
    return image


def convert_pnt_to_png(path: str | PathLike[str], table: Sequence[ColorEntry]) -> Path:
    """Render a ``.pnt`` file to a PNG beside it and return the PNG's path."""
    source = Path(path)
    if ".pnt" not in source.name:
        raise ValueError(f"{source} is not a .pnt file")
    image = pnt_to_image(read_pnt(source), table)
    target = Path(str(source.absolute())[:-4] + ".png")
    image.save(target)
    return target


def _aspect(image_width: int, image_height: int) -> float:
    if image_width <= 0 or image_height <= 0:
        raise ValueError("image dimensions must be positive")
    return image_width / image_height


def height_for_width(
    painting: Painting, image_width: int, image_height: int, width: int
) -> int:
    """Pixel height that keeps the image's look on ``painting`` at ``width``."""
    return int(width * painting.ratio / _aspect(image_width, image_height))


def width_for_height(
    painting: Painting, image_width: int, image_height: int, height: int
) -> int:
    """Pixel width that keeps the image's look on ``painting`` at ``height``."""
    aspect = _aspect(image_width, image_height)
    if painting.ratio == 0:
        raise ValueError(f"painting {painting.name!r} has a zero ratio")
    return int(height * aspect / painting.ratio)