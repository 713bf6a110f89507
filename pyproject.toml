[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ltroadinfo"
version = "0.1.0"
description = "Download Lithuanian road restrictions and speed control sections as GPX tracks"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["gpx", "lithuania", "lks-94", "wgs84", "road", "traffic", "arcgis"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
lt-road-info = "ltroadinfo.cli:main"
lt-road-verify-coords = "ltroadinfo.verify:main"

[tool.hatch.build.targets.wheel]
packages = ["ltroadinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
