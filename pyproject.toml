[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hillview"
version = "0.1.0"
description = "A text-based murder-mystery adventure set in a storm-bound student hostel."
requires-python = ">=3.10"
keywords = ["game", "text-adventure", "mystery", "interactive-fiction", "terminal"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hillview = "hillview.game:main"
hillview-hints = "hillview.hints:main"

[tool.hatch.build.targets.wheel]
packages = ["hillview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
