"""
Dice Notation - Outcomes

Reducers that turn a finished roll into a single number. Discarded values
never count.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from src.engine.value import Value


def _kept(values: Iterable[Value]) -> list[int]:
    return [v.value for v in values if not v.is_discarded]


class Outcome:
    """Base of all outcome reducers."""

    def process(self, values: Iterable[Value]) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class Total(Outcome):
    """Sum of the kept faces."""

    def process(self, values: Iterable[Value]) -> int:
        return sum(_kept(values))


@dataclass(frozen=True)
class Target(Outcome):
    """
    Number of kept faces meeting a target.

    Attributes:
        point: Lowest face that counts as a hit
    """
    point: int

    def process(self, values: Iterable[Value]) -> int:
        return sum(1 for face in _kept(values) if face >= self.point)


@dataclass(frozen=True)
class Match(Outcome):
    """Number of distinct kept faces that appear more than once."""

    def process(self, values: Iterable[Value]) -> int:
        return sum(1 for seen in Counter(_kept(values)).values() if seen > 1)
