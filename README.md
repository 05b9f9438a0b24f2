# arkpaint

Turn ordinary pictures into in-game paintings. `arkpaint` reduces an image
to a limited colour palette with error-diffusion dithering and writes the
result as one or more `.pnt` canvas files. It can also render `.pnt` files
back into PNG images.

## Installation

```
pip install .
```

Pillow is the only runtime dependency.

## Command line

Installing the package provides the `arkpaint` command. It has four
subcommands:

```
arkpaint paintings [--paintings FILE]
arkpaint convert IMAGE [options]
arkpaint pnt2png FILE [FILE ...] [--colors FILE]
arkpaint distances COLOR
```

By default the painting templates are read from `data/painting.ini` and the
colour table from `data/ColorTableEvolved.csv`, both relative to the current
directory.

- `paintings` prints each template as `<name> <width>x<height>`.
- `convert` scales the image and dithers it onto the colour table. Options:
  - `--painting` – index, name or label of the template (default `0`).
  - `--algorithm` – `FloydSteinberg` (default), `JarvisJudiceNinke` or `Sierra`.
  - `--dither` – dither factor (default `1.0`; `0` or less disables diffusion).
  - `--width`, `--height` – target size in pixels; default to the template's size.
  - `--keep-aspect` – derive the other dimension from the image's aspect
    ratio and the template's ratio (the height is derived unless only
    `--height` is given).
  - `--exclude COLOR` – leave a colour out by name; may be repeated.
  - `--png PATH` – save the converted image.
  - `--pnt PATH` – write `.pnt` canvas files based on this name.

  At least one of `--png` and `--pnt` is required. The image is resized with
  nearest-neighbour sampling before dithering. Written paths are printed.
- `pnt2png` renders each `.pnt` file to a PNG beside it and prints its path;
  files that fail are reported on standard error and the exit status is 1.
- `distances` takes a hexadecimal RGB or ARGB value (a leading `#` is
  allowed) and prints the Euclidean RGB distance to each colour of the
  built-in palette.

Errors such as missing files or bad values are reported as `error: ...` on
standard error with exit status 1.

## Library

- **Colour tables** (`arkpaint.colors`): each CSV line holds a colour name,
  an ARGB value in hexadecimal and an id, separated by commas. The id is the
  first non-blank character after the second comma, taken as its byte value;
  malformed lines are skipped. `read_color_table` reads a file,
  `parse_color_table` parses lines already in memory. Each `ColorEntry` has
  `name`, `argb`, `id` and `rgb()`. `ARK_COLOR_TABLE` is the built-in
  palette, and `color_distances` measures a colour against it.
- **Colour selection**: `ColorSelection` wraps a table and tracks which
  colours take part. All start selected; `select_all`, `deselect_all` and
  `set_checked` change the selection, `is_checked` reports it, `selected`
  returns the chosen entries and `selected_ark` the built-in palette entries
  at the same positions.
- **Dithering** (`arkpaint.dither`): `make_ditherer(name)` returns a
  `FloydSteinberg`, `JarvisJudiceNinke` or `Sierra` ditherer. Its
  `convert(image, table, dither_factor=1.0, progress=None)` returns a
  `DitherResult` with the converted RGBA `image` and a `Matrix` of colour ids
  (`color_ids`). Fully transparent pixels are kept as they are and get id 0.
  `progress`, if given, is called with a percentage after each pixel.
  `nearest_color` finds the closest table entry to a colour.
- **Painting templates** (`arkpaint.painting`): each line of a templates file
  holds a name, the suffix for saved files, the canvas width and height in
  pixels and a horizontal aspect ratio. `read_paintings` / `parse_paintings`
  load them as `Painting` objects. `height_for_width` and `width_for_height`
  compute a target size that keeps an image's look on a template.
- **.pnt files**: a 20-byte header (byte 5 is the width / 256, byte 9 the
  height / 256, byte 18 their product) followed by one colour id per pixel.
  `write_pnt_files(matrix, painting, path)` splits a matrix of ids into as
  many canvases as needed, named `<name>-<n>-y<row>-x<col>_<suffix>` next to
  `path` (a `.pnt` ending is dropped from the name), pads unused pixels with
  id 0 and returns the paths written. `read_pnt`, `pnt_to_image` and
  `convert_pnt_to_png` turn canvases back into images; ids not in the table
  become transparent.
- **Grid** (`arkpaint.matrix`): `Matrix` is a fixed-size grid where reads
  outside it return the first cell and writes outside it are ignored.
- **View sizes** (`arkpaint.view`): `ViewGeometry` computes the drawn size,
  the area size and the template outline size of an image shown at a zoom
  percentage, optionally stretched by a template's ratio.

## Example

```python
from PIL import Image

from arkpaint.colors import ColorSelection, read_color_table
from arkpaint.dither import make_ditherer
from arkpaint.painting import read_paintings, write_pnt_files

selection = ColorSelection(read_color_table("data/ColorTableEvolved.csv"))
painting = read_paintings("data/painting.ini")[0]

image = Image.open("picture.png").convert("RGBA")
image = image.resize((painting.width, painting.height))
result = make_ditherer("Sierra").convert(image, selection.selected(), 0.8)

result.image.save("preview.png")
write_pnt_files(result.color_ids, painting, "picture.pnt")
```

## What it does not do

There is no graphical interface: images are not previewed on screen, and
`ViewGeometry` only computes sizes. No colour table or painting templates
file ships with the package; supply your own.

## Running the tests

```
pip install ".[test]"
pytest
```