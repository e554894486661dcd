[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "umachine"
version = "0.1.0"
description = "An emulator for the 32-bit Universal Machine with segmented memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "virtual machine", "universal machine", "bytecode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
umachine = "umachine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["umachine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
