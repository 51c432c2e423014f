"""Command line interface for Dice Notation."""

from src.cli.main import main

__all__ = ["main"]
