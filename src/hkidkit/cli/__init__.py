"""Command-line interface for hkidkit."""

from hkidkit.cli.main import cli

__all__ = ["cli"]
