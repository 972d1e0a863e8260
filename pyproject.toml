[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "koblitzfield"
version = "0.1.0"
description = "Fixed-precision arithmetic over the secp256k1 prime field, with endomorphism vectors and byte-point table serialization"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic-curve", "finite-field", "koblitz", "cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["koblitzfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
