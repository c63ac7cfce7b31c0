[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaletypes"
version = "0.1.0"
description = "Type metadata for SCALE-encodable types: paths, fields, composites, variants and type definitions, with JSON round trips."
requires-python = ">=3.10"
dependencies = []
keywords = ["scale", "type-info", "metadata", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scaletypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
