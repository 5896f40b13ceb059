"""Parsing and ordering of semver, NuGet, Maven, Packagist and PyPI version strings."""