[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamemath"
version = "0.1.0"
description = "Small 3D math toolkit: vectors, 4x4 matrix stacks, Perlin noise, frame timing and simple TCP helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "perlin", "noise", "3d", "games", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamemath-tcp-client = "gamemath.tcp_client:main"
gamemath-tcp-server = "gamemath.tcp_server:main"

[tool.hatch.build.targets.wheel]
packages = ["gamemath"]

[tool.pytest.ini_options]
addopts = "-ra"
