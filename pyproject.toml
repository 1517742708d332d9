[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wbspn"
version = "0.1.0"
description = "White-box substitution-permutation network block cipher with SHAKE128-derived S-boxes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "white-box",
    "cryptography",
    "spn",
    "block-cipher",
    "sbox",
    "shake128",
    "keccak",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wbspn = "wbspn.cli:main"
wbspn-keygen = "wbspn.keygen:main"

[tool.hatch.build.targets.wheel]
packages = ["wbspn"]

[tool.hatch.build.targets.sdist]
include = ["wbspn", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
