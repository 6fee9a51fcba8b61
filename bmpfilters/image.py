"""In-memory RGB images and reading and writing of 24-bit BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BITS_PER_PIXEL = 24
MAX_COLOR = 255.0

# Guards the float-to-byte truncation against values such as 0.99999999 * 255.
_TRUNCATION_EPSILON = 1e-7

_FILE_HEADER = struct.Struct("<2sI4xI")
_INFO_HEADER = struct.Struct("<IiiHH24x")

PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in the range 0..1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0


def _to_byte(value: float) -> int:
    return min(255, max(0, int(value * MAX_COLOR + _TRUNCATION_EPSILON)))


def _row_padding(width: int) -> int:
    return (4 - (width * 3) % 4) % 4


class Image:
    """A rectangular grid of colours; row 0 is the first row stored in the file."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self._rows = [[Color() for _ in range(width)] for _ in range(height)]

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._rows == other._rows
        )

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")

    def get(self, x: int, y: int) -> Color:
        """Return the colour at column x, row y."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, color: Color) -> None:
        """Store a colour at column x, row y."""
        self._check(x, y)
        self._rows[y][x] = color

    def to_bytes(self) -> bytes:
        """Encode the image as a 24-bit uncompressed BMP file."""
        padding = bytes(_row_padding(self.width))
        file_size = HEADER_SIZE + (self.width * 3 + len(padding)) * self.height
        out = bytearray(_FILE_HEADER.pack(b"BM", file_size & 0xFFFFFFFF, HEADER_SIZE))
        out += _INFO_HEADER.pack(INFO_HEADER_SIZE, self.width, self.height, 0, BITS_PER_PIXEL)
        for row in self._rows:
            for color in row:
                out += bytes((_to_byte(color.blue), _to_byte(color.green), _to_byte(color.red)))
            out += padding
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> Image:
        """Decode a 24-bit uncompressed BMP file."""
        if len(data) < HEADER_SIZE:
            raise ValueError("data is too short to hold BMP headers")
        magic, _, _ = _FILE_HEADER.unpack_from(data, 0)
        if magic != b"BM":
            raise ValueError("File is not a BMP file")
        _, width, height, _, _ = _INFO_HEADER.unpack_from(data, FILE_HEADER_SIZE)
        if width < 0 or height < 0:
            raise ValueError("BMP dimensions must not be negative")
        row_bytes = width * 3
        stride = row_bytes + _row_padding(width)
        if len(data) < HEADER_SIZE + stride * height - _row_padding(width) * (height > 0):
            raise ValueError("BMP pixel data is truncated")

        image = cls(width, height)
        for y in range(height):
            start = HEADER_SIZE + y * stride
            chunk = data[start:start + row_bytes]
            triples = zip(*[iter(chunk)] * 3)
            image._rows[y] = [
                Color(red / MAX_COLOR, green / MAX_COLOR, blue / MAX_COLOR)
                for blue, green, red in triples
            ]
        return image

    def save(self, path: PathType) -> None:
        """Write the image to a BMP file."""
        with open(path, "wb") as file:
            file.write(self.to_bytes())

    @classmethod
    def read(cls, path: PathType) -> Image:
        """Load an image from a BMP file."""
        with open(path, "rb") as file:
            return cls.from_bytes(file.read())