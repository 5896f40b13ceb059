"""Ecosystem-aware version comparison and cached local OSV vulnerability databases."""

__version__ = "0.1.0"