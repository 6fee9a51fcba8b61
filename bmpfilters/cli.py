"""Command-line interface: read a BMP, apply filters in order, write the result."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from .filters import Crop, Edge, Filter, Grayscale, Negative, Sharpening
from .image import Image

USAGE = "usage: <file1> <file2> ..."
CROP_USAGE = "usage: -crop <width> <height>"
EDGE_USAGE = "usage: -edge <threshold>"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class ParsedArgs:
    """The input path, the output path and the filters to apply in order."""

    input_path: str
    output_path: str
    filters: list[Filter] = field(default_factory=list)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _leading_float(text: str) -> float:
    """Parse the real number at the start of text, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def _parse_crop(args: Sequence[str]) -> Crop:
    if len(args) < 2:
        raise IndexError(CROP_USAGE)
    try:
        width = _leading_int(args[0])
        height = _leading_int(args[1])
    except ValueError:
        width = height = 0
    if width <= 0 or height <= 0:
        raise ValueError("width and height arguments must be positive integers")
    return Crop(width, height)


def _parse_edge(args: Sequence[str]) -> Edge:
    if not args:
        raise IndexError(EDGE_USAGE)
    try:
        threshold = _leading_float(args[0])
    except ValueError:
        threshold = -1.0
    if not math.isnan(threshold) and not 0 <= threshold <= 1:
        raise ValueError("threshold argument must be a real number from 0 to 1")
    return Edge(threshold)


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Parse arguments (without the program name) into paths and filters.

    Raises ValueError for bad usage or bad values and IndexError when a
    filter flag lacks its arguments.
    """
    if len(argv) < 2:
        raise ValueError(USAGE)
    parsed = ParsedArgs(argv[0], argv[1])
    pos = 2
    while pos < len(argv):
        flag = argv[pos]
        rest = argv[pos + 1:]
        if flag == "-crop":
            parsed.filters.append(_parse_crop(rest))
            pos += 3
        elif flag == "-gs":
            parsed.filters.append(Grayscale())
            pos += 1
        elif flag == "-neg":
            parsed.filters.append(Negative())
            pos += 1
        elif flag == "-sharp":
            parsed.filters.append(Sharpening())
            pos += 1
        elif flag == "-edge":
            parsed.filters.append(_parse_edge(rest))
            pos += 2
        else:
            raise ValueError(f"expected filter flag, got {flag}")
    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the processor; return 0 on success and 1 on error."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        parsed = parse_args(list(argv))
        image = Image.read(parsed.input_path)
        for image_filter in parsed.filters:
            image = image_filter.apply(image)
        image.save(parsed.output_path)
    except (ValueError, IndexError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())