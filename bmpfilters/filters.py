"""Image filters: crop, grayscale, negative, sharpening and edge detection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from .image import Color, Image

SHARPEN_KERNEL = ((0, -1, 0), (-1, 5, -1), (0, -1, 0))
EDGE_KERNEL = ((0, -1, 0), (-1, 4, -1), (0, -1, 0))


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Filter(ABC):
    """A transformation from one image to a new one."""

    @abstractmethod
    def apply(self, image: Image) -> Image:
        """Return a filtered copy of the image."""


def apply_matrix_filter(image: Image, matrix: Sequence[Sequence[float]]) -> Image:
    """Convolve the image with a kernel, repeating edge pixels and clamping to 0..1."""
    h_radius = len(matrix) // 2
    w_radius = len(matrix[0]) // 2
    result = Image(image.width, image.height)
    for y in range(image.height):
        for x in range(image.width):
            red = green = blue = 0.0
            for dy in range(-h_radius, h_radius + 1):
                cur_y = _clamp(y + dy, 0, image.height - 1)
                for dx in range(-w_radius, w_radius + 1):
                    cur_x = _clamp(x + dx, 0, image.width - 1)
                    weight = matrix[dy + h_radius][dx + w_radius]
                    color = image.get(cur_x, cur_y)
                    red += color.red * weight
                    green += color.green * weight
                    blue += color.blue * weight
            result.set(
                x,
                y,
                Color(_clamp(red, 0.0, 1.0), _clamp(green, 0.0, 1.0), _clamp(blue, 0.0, 1.0)),
            )
    return result


@dataclass(frozen=True)
class Crop(Filter):
    """Keep at most width columns and the last height rows of the image."""

    width: int
    height: int

    def apply(self, image: Image) -> Image:
        result = Image(min(self.width, image.width), min(self.height, image.height))
        offset = image.height - result.height
        for y in range(result.height):
            for x in range(result.width):
                result.set(x, y, image.get(x, y + offset))
        return result


@dataclass(frozen=True)
class Grayscale(Filter):
    """Replace each colour with its weighted luminance."""

    red_weight: float = 0.299
    green_weight: float = 0.587
    blue_weight: float = 0.114

    def apply(self, image: Image) -> Image:
        result = Image(image.width, image.height)
        for y in range(image.height):
            for x in range(image.width):
                color = image.get(x, y)
                gray = (
                    self.red_weight * color.red
                    + self.green_weight * color.green
                    + self.blue_weight * color.blue
                )
                result.set(x, y, Color(gray, gray, gray))
        return result


class Negative(Filter):
    """Invert every channel."""

    def apply(self, image: Image) -> Image:
        result = Image(image.width, image.height)
        for y in range(image.height):
            for x in range(image.width):
                color = image.get(x, y)
                result.set(x, y, Color(1 - color.red, 1 - color.green, 1 - color.blue))
        return result


class Sharpening(Filter):
    """Sharpen with a 3x3 kernel."""

    def apply(self, image: Image) -> Image:
        return apply_matrix_filter(image, SHARPEN_KERNEL)


@dataclass(frozen=True)
class Edge(Filter):
    """Detect edges: pixels whose Laplacian exceeds the threshold become white."""

    threshold: float

    def apply(self, image: Image) -> Image:
        result = apply_matrix_filter(Grayscale().apply(image), EDGE_KERNEL)
        white = Color(1.0, 1.0, 1.0)
        black = Color(0.0, 0.0, 0.0)
        for y in range(result.height):
            for x in range(result.width):
                result.set(x, y, white if result.get(x, y).red > self.threshold else black)
        return result