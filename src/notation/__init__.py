"""
Dice Notation Parser.

Turns notation strings into a Die and its Behaviours.
"""

from src.notation.parser import parse_behaviour, parse_roll, tokenize

__all__ = ["parse_behaviour", "parse_roll", "tokenize"]
