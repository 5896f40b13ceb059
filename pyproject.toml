[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osvtools"
version = "0.1.0"
description = "Ecosystem-aware version comparison and cached local OSV vulnerability databases"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "osv",
    "vulnerability",
    "security",
    "semver",
    "pep440",
    "maven",
    "packagist",
    "nuget",
    "version-comparison",
]
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
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["osvtools"]

[tool.hatch.build.targets.sdist]
include = ["osvtools", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
