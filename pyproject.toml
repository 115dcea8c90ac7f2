[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowtx"
version = "0.1.0"
description = "Recursive Length Prefix (RLP) encoding and strict decoding of byte strings, integers and lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["rlp", "encoding", "serialization", "codec", "flow"]
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
packages = ["flowtx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
