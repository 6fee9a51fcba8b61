"""Read and write 24-bit BMP images and apply crop, grayscale, negative, sharpen and edge filters."""

__version__ = "0.1.0"