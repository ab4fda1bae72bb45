[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "crossroad"
version = "1.0.0"
description = "A terminal road-crossing arcade game, with two small shape-factory demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "console", "cross-the-road"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crossroad = "crossroad.app:main"
crossroad-abstract-factory = "crossroad.abstract_factory:main"
crossroad-factory-method = "crossroad.factory_method:main"

[tool.setuptools.packages.find]
include = ["crossroad*"]

[tool.pytest.ini_options]
addopts = "-ra"
