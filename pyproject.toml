[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filecrypt"
version = "0.1.0"
description = "Toy Caesar, RSA and XOR ciphers with in-place file rewriting driven by task strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["encryption", "caesar", "rsa", "xor", "files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["filecrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
