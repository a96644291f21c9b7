[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msgparts"
version = "4.2.0"
description = "Multipart messages with typed, network-byte-order parts"
requires-python = ">=3.10"
dependencies = []
keywords = ["message", "multipart", "frames", "serialization", "network byte order"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msgparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
