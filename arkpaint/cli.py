"""Command-line front end: convert images to painting files and back."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from PIL import Image

from .colors import (
    DEFAULT_COLOR_TABLE_PATH,
    ColorSelection,
    color_distances,
    read_color_table,
)
from .dither import DITHER_NAMES, make_ditherer
from .painting import (
    DEFAULT_PAINTINGS_PATH,
    Painting,
    convert_pnt_to_png,
    height_for_width,
    read_paintings,
    width_for_height,
    write_pnt_files,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arkpaint", description="Convert images into in-game painting files."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    listing = sub.add_parser("paintings", help="list the available paintings")
    listing.add_argument("--paintings", default=DEFAULT_PAINTINGS_PATH)

    convert = sub.add_parser("convert", help="dither an image onto a painting")
    convert.add_argument("image")
    convert.add_argument("--paintings", default=DEFAULT_PAINTINGS_PATH)
    convert.add_argument("--colors", default=DEFAULT_COLOR_TABLE_PATH)
    convert.add_argument("--painting", default="0", help="index or name of the painting")
    convert.add_argument("--algorithm", choices=DITHER_NAMES, default=DITHER_NAMES[0])
    convert.add_argument("--dither", type=float, default=1.0)
    convert.add_argument("--width", type=int)
    convert.add_argument("--height", type=int)
    convert.add_argument("--keep-aspect", action="store_true")
    convert.add_argument("--exclude", action="append", default=[], metavar="COLOR")
    convert.add_argument("--png", help="save the converted image here")
    convert.add_argument("--pnt", help="write painting files based on this name")

    back = sub.add_parser("pnt2png", help="render painting files as PNG images")
    back.add_argument("files", nargs="+")
    back.add_argument("--colors", default=DEFAULT_COLOR_TABLE_PATH)

    dist = sub.add_parser("distances", help="distance of a colour to the built-in palette")
    dist.add_argument("color", help="hexadecimal RGB or ARGB value")
    return parser


def _select_painting(paintings: Sequence[Painting], key: str) -> Painting:
    if not paintings:
        raise ValueError("no paintings are defined")
    if key.isdigit():
        index = int(key)
        if index >= len(paintings):
            raise ValueError(f"painting index {index} out of range")
        return paintings[index]
    for painting in paintings:
        if key in (painting.name, painting.label()):
            return painting
    raise ValueError(f"unknown painting {key!r}")


def _target_size(
    args: argparse.Namespace, painting: Painting, image_size: tuple[int, int]
) -> tuple[int, int]:
    width = args.width if args.width is not None else painting.width
    height = args.height if args.height is not None else painting.height
    if args.keep_aspect:
        if args.width is None and args.height is not None:
            width = width_for_height(painting, *image_size, height)
        else:
            height = height_for_width(painting, *image_size, width)
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid target size {width}x{height}")
    return width, height


def _convert(args: argparse.Namespace) -> int:
    painting = _select_painting(read_paintings(args.paintings), args.painting)
    selection = ColorSelection(read_color_table(args.colors))
    names = [entry.name for entry in selection.table]
    for name in args.exclude:
        if name not in names:
            raise ValueError(f"unknown colour {name!r}")
        selection.set_checked(names.index(name), False)

    with Image.open(args.image) as opened:
        source = opened.convert("RGBA")
    size = _target_size(args, painting, source.size)
    scaled = source.resize(size, Image.Resampling.NEAREST)
    result = make_ditherer(args.algorithm).convert(scaled, selection.selected(), args.dither)

    if args.png:
        result.image.save(args.png)
        print(args.png)
    if args.pnt:
        for path in write_pnt_files(result.color_ids, painting, args.pnt):
            print(path)
    return 0


def _pnt2png(args: argparse.Namespace) -> int:
    table = ColorSelection(read_color_table(args.colors)).selected()
    status = 0
    for name in args.files:
        try:
            print(convert_pnt_to_png(name, table))
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
    return status


def _distances(args: argparse.Namespace) -> int:
    value = int(args.color.lstrip("#"), 16)
    for name, distance in color_distances(value):
        print(f"{name}: {distance:g}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "convert" and not (args.png or args.pnt):
        parser.error("convert needs --png and/or --pnt")
    try:
        if args.command == "paintings":
            for painting in read_paintings(args.paintings):
                print(painting.label())
            return 0
        if args.command == "convert":
            return _convert(args)
        if args.command == "pnt2png":
            return _pnt2png(args)
        return _distances(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())