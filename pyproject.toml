[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sxpup"
version = "0.1.0"
description = "LZSS and block-compressed DAT codecs, binary record I/O, file-name helpers and game asset utilities"
requires-python = ">=3.10"
keywords = ["lzss", "compression", "dat", "binary", "png", "matrix", "dos"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sxpup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
