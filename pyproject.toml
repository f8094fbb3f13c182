[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitengine"
version = "0.1.0"
description = "A small 2D engine with hierarchical transforms and a sun-earth-moon orbit demo"
requires-python = ">=3.10"
keywords = ["2d", "engine", "transform", "matrix", "pygame", "solar-system", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbitengine-demo = "orbitengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitengine"]

[tool.pytest.ini_options]
addopts = "-ra"
