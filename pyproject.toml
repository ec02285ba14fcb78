[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battleships"
version = "0.1.0"
description = "Title screen of a Battleships game, built on a scene-based pygame loop"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "battleships", "pygame", "scenes"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
battleships = "battleships.app:main"

[tool.hatch.build.targets.wheel]
packages = ["battleships"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
