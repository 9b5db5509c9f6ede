[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqwrap"
version = "0.1.0"
description = "32-bit wrapping TCP sequence numbers and conversion to and from 64-bit absolute sequence numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "sequence number", "wrapping integer", "networking"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["seqwrap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
