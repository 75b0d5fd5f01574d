[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eccore"
version = "0.11.1"
description = "Curve-agnostic building blocks for elliptic curve cryptography: scalars, public keys and JSON Web Keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["elliptic-curve", "ecc", "scalar", "jwk", "sec1", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eccore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
