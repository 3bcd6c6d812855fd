[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tps6699x"
version = "0.1.0"
description = "Byte-stream helpers and a Tx Identity register model for TPS6699x USB PD controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["usb-pd", "usb-c", "register", "embedded", "tps6699x"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tps6699x"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
