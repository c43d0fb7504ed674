[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rrt"
version = "0.1.0"
description = "A small ray tracer that renders scenes to plain-text PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "ppm", "graphics", "3d", "anti-aliasing"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rrt = "rrt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
