"""Parsing, checking, transforming, merging and watching .env files."""

__version__ = "0.1.0"