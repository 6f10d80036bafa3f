[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelpets"
version = "1.0.0"
description = "A pixel-art virtual pet game: keep your cat or dog fed, watered and happy for as long as you can."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "virtual pet", "pixel art", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelpets = "pixelpets.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelpets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
