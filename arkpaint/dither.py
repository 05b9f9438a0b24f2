"""Error-diffusion dithering of images onto a limited colour palette."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from PIL import Image

from .colors import ColorEntry
from .matrix import Matrix

Error = tuple[float, float, float]
ProgressCallback = Callable[[int], None]

_ZERO_ERROR: Error = (0.0, 0.0, 0.0)


def nearest_color(
    rgb: tuple[int, int, int],
    table: Sequence[ColorEntry],
    error: Error = _ZERO_ERROR,
) -> tuple[int, tuple[int, int, int]]:
    """Find the table entry closest to ``rgb`` shifted by ``error``.

    Each shifted channel is truncated towards zero. Returns the index of the
    first entry at minimal Euclidean distance and the signed per-channel
    difference between the shifted colour and that entry.
    """
    if not table:
        raise ValueError("colour table is empty")
    shifted = tuple(int(channel + delta) for channel, delta in zip(rgb, error))
    best_index = 0
    best_distance = -1
    best_error = (0, 0, 0)
    for index, entry in enumerate(table):
        diff = tuple(s - t for s, t in zip(shifted, entry.rgb()))
        distance = sum(d * d for d in diff)
        if best_distance < 0 or distance < best_distance:
            best_distance = distance
            best_index = index
            best_error = diff
    return best_index, best_error


@dataclass
class DitherResult:
    """A converted image and the palette id chosen for each pixel."""

    image: Image.Image
    color_ids: Matrix


class Ditherer:
    """Base class for error-diffusion ditherers.

    ``KERNEL`` lists diffusion weights row by row, ``KERNEL_WIDTH`` entries
    per row, centred horizontally on the current pixel.
    """

    KERNEL: tuple[float, ...] = ()
    KERNEL_WIDTH: int = 1

    def __init__(self) -> None:
        self._errors = Matrix()

    @property
    def _offset(self) -> int:
        return self.KERNEL_WIDTH // 2

    def _init_errors(self, width: int, height: int) -> None:
        kernel_rows = len(self.KERNEL) // self.KERNEL_WIDTH
        self._errors = Matrix(
            height + kernel_rows - 1, width + self.KERNEL_WIDTH - 1, _ZERO_ERROR
        )

    def _error_at(self, row: int, col: int) -> Error:
        return self._errors.get(row, col + self._offset)

    def _spread_error(self, row: int, col: int, error: Error) -> None:
        for i, weight in enumerate(self.KERNEL):
            r = row + i // self.KERNEL_WIDTH
            c = col + i % self.KERNEL_WIDTH
            current = self._errors.get(r, c)
            self._errors.set(
                r, c, tuple(e * weight + old for e, old in zip(error, current))
            )

    def convert(
        self,
        image: Image.Image,
        table: Sequence[ColorEntry],
        dither_factor: float = 1.0,
        progress: ProgressCallback | None = None,
    ) -> DitherResult:
        """Map every opaque pixel of ``image`` onto ``table``.

        Fully transparent pixels are kept as they are and get id 0. When
        ``dither_factor`` is positive the quantisation error, scaled by it,
        is diffused to neighbouring pixels. ``progress`` receives a
        percentage after each pixel.
        """
        if not table:
            raise ValueError("colour table is empty")
        source = image if image.mode == "RGBA" else image.convert("RGBA")
        width, height = source.size
        self._init_errors(width, height)
        ids = Matrix(height, width, 0)
        output = Image.new("RGBA", (width, height))
        src_px = source.load()
        out_px = output.load()
        total = width * height

        for y in range(height):
            for x in range(width):
                if progress is not None:
                    progress(100 * (width * y + x + 1) // total)
                r, g, b, a = src_px[x, y]
                if a == 0:
                    out_px[x, y] = (r, g, b, a)
                    ids.set(y, x, 0)
                    continue
                index, error = nearest_color((r, g, b), table, self._error_at(y, x))
                if dither_factor > 0:
                    self._spread_error(
                        y, x, tuple(e * dither_factor for e in error)
                    )
                entry = table[index]
                out_px[x, y] = (*entry.rgb(), (entry.argb >> 24) & 0xFF)
                ids.set(y, x, entry.id)

        return DitherResult(output, ids)


class FloydSteinberg(Ditherer):
    """Floyd-Steinberg diffusion over a 3x2 neighbourhood."""

    KERNEL = (0.0, 0.0, 7 / 16, 3 / 16, 5 / 16, 1 / 16)
    KERNEL_WIDTH = 3


class JarvisJudiceNinke(Ditherer):
    """Jarvis-Judice-Ninke diffusion over a 5x3 neighbourhood."""

    KERNEL = (
        0.0, 0.0, 0.0, 7 / 48, 5 / 48,
        3 / 48, 5 / 48, 7 / 48, 5 / 48, 3 / 48,
        1 / 48, 3 / 48, 5 / 48, 3 / 48, 1 / 48,
    )
    KERNEL_WIDTH = 5


class Sierra(Ditherer):
    """Sierra diffusion over a 5x3 neighbourhood."""

    KERNEL = (
        0.0, 0.0, 0.0, 5 / 32, 3 / 32,
        2 / 32, 4 / 32, 5 / 32, 4 / 32, 2 / 32,
        0.0, 2 / 32, 3 / 32, 2 / 32, 0.0,
    )
    KERNEL_WIDTH = 5


DITHERERS: dict[str, type[Ditherer]] = {
    "FloydSteinberg": FloydSteinberg,
    "JarvisJudiceNinke": JarvisJudiceNinke,
    "Sierra": Sierra,
}

DITHER_NAMES: tuple[str, ...] = tuple(DITHERERS)


def make_ditherer(name: str) -> Ditherer:
    """Create the ditherer registered under ``name``."""
    try:
        return DITHERERS[name]()
    except KeyError:
        raise ValueError(
            f"unknown dithering algorithm {name!r}; choose from {', '.join(DITHER_NAMES)}"
        ) from None