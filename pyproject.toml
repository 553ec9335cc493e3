[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silentpcg"
version = "0.1.0"
description = "Pseudorandom correlation generators for subfield VOLE and random oblivious transfer"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["pcg", "vole", "oblivious-transfer", "dpf", "lpn", "cryptography"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["silentpcg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
