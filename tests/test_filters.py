import pytest

from bmpfilters.filters import (
    Crop,
    Edge,
    Filter,
    Grayscale,
    Negative,
    Sharpening,
    apply_matrix_filter,
)
from bmpfilters.image import Color, Image


def _filled(width, height, color):
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.set(x, y, color)
    return image


def _gradient(width=4, height=3):
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.set(x, y, Color(x / width, y / height, (x + y) / (width + height)))
    return image


def _channels(image):
    return [
        channel
        for y in range(image.height)
        for x in range(image.width)
        for channel in (image.get(x, y).red, image.get(x, y).green, image.get(x, y).blue)
    ]


def test_filter_is_abstract():
    with pytest.raises(TypeError):
        Filter()


def test_identity_kernel_keeps_image():
    image = _gradient()
    result = apply_matrix_filter(image, [[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    assert (result.width, result.height) == (image.width, image.height)
    assert _channels(result) == pytest.approx(_channels(image))


def test_matrix_filter_clamps_results():
    image = _filled(2, 2, Color(0.75, 0.75, 0.75))
    result = apply_matrix_filter(image, [[2]])
    assert result.get(1, 1) == Color(1.0, 1.0, 1.0)
    negative = apply_matrix_filter(image, [[-1]])
    assert negative.get(0, 0) == Color(0.0, 0.0, 0.0)


def test_matrix_filter_on_empty_image():
    assert apply_matrix_filter(Image(), [[1]]) == Image()


def test_crop_smaller():
    image = _gradient(5, 4)
    result = Crop(2, 3).apply(image)
    assert (result.width, result.height) == (2, 3)


def test_crop_keeps_last_rows():
    image = _gradient(3, 3)
    result = Crop(3, 1).apply(image)
    assert [result.get(x, 0) for x in range(3)] == [image.get(x, 2) for x in range(3)]


def test_crop_larger_than_image_is_unchanged():
    image = _gradient(3, 2)
    assert Crop(10, 10).apply(image) == image


def test_crop_does_not_modify_input():
    image = _gradient(3, 3)
    before = Crop(10, 10).apply(image)
    Crop(1, 1).apply(image)
    assert image == before


def test_grayscale_channels_equal():
    result = Grayscale().apply(_gradient())
    assert all(
        result.get(x, y).red == result.get(x, y).green == result.get(x, y).blue
        for y in range(result.height)
        for x in range(result.width)
    )


def test_grayscale_of_pure_red():
    result = Grayscale().apply(_filled(1, 1, Color(1.0, 0.0, 0.0)))
    assert result.get(0, 0).red == pytest.approx(0.299)


def test_grayscale_keeps_white():
    result = Grayscale().apply(_filled(2, 2, Color(1.0, 1.0, 1.0)))
    assert result.get(1, 1).green == pytest.approx(1.0)


def test_negative_of_black_is_white():
    result = Negative().apply(_filled(2, 1, Color()))
    assert result.get(1, 0) == Color(1.0, 1.0, 1.0)


def test_negative_twice_is_identity():
    image = _gradient()
    result = Negative().apply(Negative().apply(image))
    assert (result.width, result.height) == (image.width, image.height)
    assert _channels(result) == pytest.approx(_channels(image))


def test_sharpening_keeps_uniform_image():
    image = _filled(3, 3, Color(0.2, 0.4, 0.6))
    result = Sharpening().apply(image)
    assert (result.width, result.height) == (3, 3)
    assert _channels(result) == pytest.approx([0.2, 0.4, 0.6] * 9)


def test_sharpening_preserves_dimensions():
    result = Sharpening().apply(_gradient(6, 2))
    assert (result.width, result.height) == (6, 2)


def test_edge_uniform_image_is_black():
    result = Edge(0.0).apply(_filled(3, 3, Color(0.5, 0.5, 0.5)))
    assert all(result.get(x, y) == Color() for y in range(3) for x in range(3))


def test_edge_marks_isolated_white_pixel():
    image = _filled(3, 3, Color())
    image.set(1, 1, Color(1.0, 1.0, 1.0))
    result = Edge(0.5).apply(image)
    assert result.get(1, 1) == Color(1.0, 1.0, 1.0)
    assert result.get(0, 1) == Color()
    assert result.get(2, 2) == Color()


def test_edge_output_is_binary():
    result = Edge(0.1).apply(_gradient(5, 5))
    allowed = {Color(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0)}
    assert {result.get(x, y) for y in range(5) for x in range(5)} <= allowed