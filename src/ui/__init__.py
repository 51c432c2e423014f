"""Terminal output for Dice Notation."""

from src.ui.terminal import render_roll, render_value, styled

__all__ = ["render_roll", "render_value", "styled"]
