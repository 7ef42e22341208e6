[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "herald"
version = "0.1.0"
description = "Terminal typography building blocks: ANSI styles, colour palettes, themes, fieldsets and list items"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "typography", "ansi", "themes", "styling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["herald"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
