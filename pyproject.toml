[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "envoysync"
version = "0.1.0"
description = "Parse, inspect, transform and synchronise .env files"
requires-python = ">=3.10"
dependencies = []
keywords = ["dotenv", "env", "environment", "configuration", "secrets", "lint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["envoysync"]

[tool.hatch.build.targets.sdist]
include = ["envoysync", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
