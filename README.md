# bmpfilters

bmpfilters reads an uncompressed 24-bit BMP image and runs a chain of filters
over it. The filters run in the order you give them. The result is written to a
new 24-bit BMP file.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Command line

```
bmpfilters <input.bmp> <output.bmp> [filter ...]
```

The filters are:

| Flag                       | Effect                                                                  |
|----------------------------|-------------------------------------------------------------------------|
| `-crop <width> <height>`   | Keeps at most `width` columns and `height` rows, from the top-left corner of a normal bottom-up BMP. Both values must be positive integers. |
| `-gs`                      | Converts to grayscale as 0.299 R + 0.587 G + 0.114 B.                   |
| `-neg`                     | Inverts every colour channel.                                           |
| `-sharp`                   | Sharpens with the 3×3 kernel `0 -1 0 / -1 5 -1 / 0 -1 0`.               |
| `-edge <threshold>`        | Converts to grayscale and applies the kernel `0 -1 0 / -1 4 -1 / 0 -1 0`. Pixels above the threshold turn white and all others turn black. The threshold must be a number from 0 to 1. |

Example:

```
bmpfilters photo.bmp out.bmp -crop 800 600 -gs -edge 0.1
```

If the arguments are not valid, the input cannot be read, or the output cannot
be written, the command prints `error: <message>` to standard error and exits
with status 1. On success it exits with status 0.

## Library use

```python
from bmpfilters.image import Image
from bmpfilters.filters import Crop, Grayscale, Negative, Sharpening, Edge

image = Image.read("photo.bmp")
for step in (Crop(800, 600), Sharpening(), Edge(0.1)):
    image = step.apply(image)
image.save("out.bmp")
```

- `Color(red, green, blue)` is an immutable pixel. Each channel is a float from 0 to 1.
- `Image(width, height)` creates a black image. `image.get(x, y)` returns a pixel,
  `image.set(x, y, color)` replaces one, and both raise `IndexError` when the
  coordinates fall outside the image. Row 0 is the first row stored in the file.
- `Image.to_bytes()` and `Image.from_bytes(data)` convert between an image and
  BMP data in memory. `Image.save(path)` and `Image.read(path)` do the same with files.
- `bmpfilters.cli.parse_args(argv)` turns a list of arguments into a `ParsedArgs`
  that holds `input_path`, `output_path` and `filters`. `bmpfilters.cli.main(argv)`
  runs the whole command.

Every filter subclasses `Filter` and returns a new image from `apply(image)`.
To build your own convolution filter, call `apply_matrix_filter(image, matrix)`
with a kernel of odd size. Pixels past the image border take the value of the
nearest edge pixel, and each result is clamped to the range 0 to 1.

## Limitations

- The reader checks only the `BM` signature and the image size. It treats the
  pixel data as uncompressed 24-bit BGR and does not check the bit depth or the
  compression fields. Palette, 32-bit and compressed BMPs are not decoded correctly.
- Top-down BMPs, which store a negative height, are rejected with `ValueError`.
- The writer always produces a bottom-up 24-bit BMP.

## Running the tests

```
pytest
```