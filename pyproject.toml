[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drtabi"
version = "0.1.0"
description = "Encoding and decoding of smart contract values in the nested and top-level binary forms, with hex argument serialization"
requires-python = ">=3.10"
dependencies = []
keywords = ["abi", "codec", "serialization", "smart-contracts", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drtabi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
