[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmplfuncs"
version = "0.1.0"
description = "Function namespaces for templates: strings, math, paths, regular expressions, hashing, base64, time, UUIDs and I/O helpers"
requires-python = ">=3.10"
keywords = ["template", "functions", "strings", "math", "regexp", "uuid", "hashing", "base64"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]
dependencies = [
    "python-slugify",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tmplfuncs"]

[tool.pytest.ini_options]
addopts = "-ra"
