[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mostools"
version = "0.1.0"
description = "Host-side build helpers for a small teaching kernel: an ELF32 section lister and a binary-to-C array converter"
requires-python = ">=3.10"
dependencies = []
keywords = ["elf", "elf32", "readelf", "bintoc", "kernel", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mos-readelf = "mostools.readelf:main"
mos-bintoc = "mostools.bintoc:main"

[tool.hatch.build.targets.wheel]
packages = ["mostools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
