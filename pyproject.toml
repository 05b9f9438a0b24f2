[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arkpaint"
version = "1.0.0"
description = "Convert images into dithered, palette-limited paintings and .pnt canvas files"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "dithering",
    "floyd-steinberg",
    "jarvis-judice-ninke",
    "sierra",
    "palette",
    "painting",
    "pnt",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = [
    "pytest",
]

[project.scripts]
arkpaint = "arkpaint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arkpaint"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
