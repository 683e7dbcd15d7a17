[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crosseditor"
version = "0.1.0"
description = "Geometry, SVG generation, local storage and database exchange for road intersection schemes"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["intersection", "traffic", "svg", "geometry", "road", "crossroad"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["crosseditor"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
