[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kangaroo"
version = "2.2.0"
description = "secp256k1 elliptic-curve arithmetic, fixed-width big-integer helpers and prime-field tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic curve", "finite field", "montgomery", "big integer", "miller-rabin"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kangaroo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
