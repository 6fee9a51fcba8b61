[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpfilters"
version = "0.1.0"
description = "Apply crop, grayscale, negative, sharpen and edge filters to 24-bit BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "image", "filter", "grayscale", "edge-detection", "sharpen"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpfilters = "bmpfilters.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpfilters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
