"""Colour tables: the built-in in-game palette and CSV-defined tables."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

COLOR_EMPTY = 0
DEFAULT_COLOR_TABLE_PATH = "data/ColorTableEvolved.csv"

_UINT32 = 0xFFFFFFFF
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


@dataclass(frozen=True)
class ColorEntry:
    """A named palette colour with its ARGB value and in-game dye id."""

    name: str
    argb: int
    id: int

    def rgb(self) -> tuple[int, int, int]:
        """Return the (red, green, blue) components."""
        return (self.argb >> 16) & 0xFF, (self.argb >> 8) & 0xFF, self.argb & 0xFF


ARK_COLOR_TABLE: tuple[ColorEntry, ...] = (
    ColorEntry("Black", 0xFF1C1C1C, 0x04),
    ColorEntry("Blue", 0xFF0000FF, 0x03),
    ColorEntry("Brick", 0xFF94321C, 0x18),
    ColorEntry("Brown", 0xFF756046, 0x06),
    ColorEntry("Cantaloupe", 0xFFFF9A00, 0x19),
    ColorEntry("Cyan", 0xFF00FFFF, 0x07),
    ColorEntry("Forest", 0xFF006B00, 0x08),
    ColorEntry("Green", 0xFF00FF00, 0x02),
    ColorEntry("Magenta", 0xFFE71CD9, 0x17),
    ColorEntry("Mud", 0xFF463B2B, 0x1A),
    ColorEntry("Navy", 0xFF32326B, 0x1B),
    ColorEntry("Olive", 0xFFBABA59, 0x1C),
    ColorEntry("Orange", 0xFFFF8800, 0x0B),
    ColorEntry("Parchment", 0xFFFFFFBA, 0x0C),
    ColorEntry("Pink", 0xFFFF7BE1, 0x0D),
    ColorEntry("Purple", 0xFF7B00E0, 0x0E),
    ColorEntry("Red", 0xFFFF0000, 0x01),
    ColorEntry("Royalty", 0xFF7B00A8, 0x10),
    ColorEntry("Silver", 0xFFE0E0E0, 0x11),
    ColorEntry("Sky", 0xFFBAD4FF, 0x12),
    ColorEntry("Slate", 0xFF595959, 0x1D),
    ColorEntry("Tan", 0xFFFFEDB2, 0x13),
    ColorEntry("Tangerine", 0xFFAD652B, 0x14),
    ColorEntry("White", 0xFFFEFEFE, 0x15),
    ColorEntry("Yellow", 0xFFFFFF00, 0x16),
)


def _parse_hex(text: str) -> int:
    match = _HEX_RE.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits, 16)
    if value > _UINT32:
        return _UINT32
    if sign == "-":
        value = -value
    return value & _UINT32


def _parse_line(line: str) -> ColorEntry | None:
    line = line.rstrip("\n")
    name, sep, rest = line.partition(",")
    if not sep:
        return None
    argb_text, sep, rest = rest.partition(",")
    if not sep:
        return None
    id_text = rest.lstrip()
    if not id_text:
        return None
    return ColorEntry(name, _parse_hex(argb_text), id_text[0].encode("utf-8")[0])


def parse_color_table(lines: Iterable[str]) -> list[ColorEntry]:
    """Parse ``name,argb-hex,id`` lines; malformed lines are skipped.

    The id is the first non-blank character after the second comma,
    taken as its byte value.
    """
    return [entry for entry in map(_parse_line, lines) if entry is not None]


def read_color_table(path: str | PathLike[str]) -> list[ColorEntry]:
    """Read a colour table CSV file."""
    with open(path, encoding="utf-8") as handle:
        return parse_color_table(handle)


def color_distances(rgb: int) -> list[tuple[str, float]]:
    """Euclidean RGB distance from an ARGB value to each built-in colour."""
    r, g, b = (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF
    result = []
    for entry in ARK_COLOR_TABLE:
        er, eg, eb = entry.rgb()
        result.append((entry.name, math.sqrt((er - r) ** 2 + (eg - g) ** 2 + (eb - b) ** 2)))
    return result


class ColorSelection:
    """Tracks which colours of a table are enabled; all start enabled."""

    def __init__(self, table: Iterable[ColorEntry]) -> None:
        self.table: list[ColorEntry] = list(table)
        self._checked: list[bool] = [True] * len(self.table)

    def select_all(self) -> None:
        self._checked = [True] * len(self.table)

    def deselect_all(self) -> None:
        self._checked = [False] * len(self.table)

    def set_checked(self, index: int, checked: bool) -> None:
        if not 0 <= index < len(self.table):
            raise IndexError(f"colour index {index} out of range")
        self._checked[index] = bool(checked)

    def is_checked(self, index: int) -> bool:
        return self._checked[index]

    def selected(self) -> list[ColorEntry]:
        """Enabled entries of this table, in table order."""
        return [e for e, on in zip(self.table, self._checked) if on]

    def selected_ark(self) -> list[ColorEntry]:
        """Built-in palette entries at the positions enabled in this table."""
        return [e for e, on in zip(ARK_COLOR_TABLE, self._checked) if on]