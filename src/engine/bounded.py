"""
Dice Notation - Bounded Ranges

Intervals over small signed integers with independently unbounded,
inclusive or exclusive ends. They serve two purposes: trigger zones for
behaviours (membership) and ranking keys for behaviour execution order.
The two must not be confused, so the ranking comparator is kept separate
and ``Bounded`` does not define ``<``.
"""

from dataclasses import dataclass
from enum import Enum, auto


class BoundKind(Enum):
    """How one end of a range is anchored."""
    UNBOUNDED = auto()
    INCLUDED = auto()
    EXCLUDED = auto()


@dataclass(frozen=True)
class Bound:
    """
    One end of a range.

    Attributes:
        kind: Anchoring of this end
        value: Anchor point (None when unbounded)
    """
    kind: BoundKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED and self.value is not None:
            raise ValueError("An unbounded end cannot carry a value.")
        if self.kind is not BoundKind.UNBOUNDED and self.value is None:
            raise ValueError(f"A {self.kind.name.lower()} end needs a value.")

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    @classmethod
    def included(cls, value: int) -> "Bound":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, value)

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    def order_key(self) -> tuple[int, ...]:
        """
        Ranking key used to order behaviours.

        Finite bounds rank by value alone, inclusive and exclusive alike.
        Any finite bound ranks before ``UNBOUNDED``.
        """
        if self.is_unbounded:
            return (1,)
        return (0, self.value)


def compare_bounds(this: Bound, that: Bound) -> int:
    """Three-way comparison of two bounds for ranking (-1, 0 or 1)."""
    left, right = this.order_key(), that.order_key()
    return (left > right) - (left < right)


@dataclass(frozen=True)
class Bounded:
    """
    A range with a start and an end bound.

    Attributes:
        start: Lower end
        end: Upper end
    """
    start: Bound
    end: Bound

    @classmethod
    def range_from(cls, start: int) -> "Bounded":
        """``start..`` (closed below, open above)."""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def range_to(cls, end: int) -> "Bounded":
        """``..=end`` (open below, closed above)."""
        return cls(Bound.unbounded(), Bound.included(end))

    @classmethod
    def between(cls, start: int, end: int) -> "Bounded":
        """``start..=end``."""
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def unbounded(cls) -> "Bounded":
        return cls(Bound.unbounded(), Bound.unbounded())

    def contains(self, value: int) -> bool:
        """Interval membership honouring inclusive and exclusive ends."""
        start, end = self.start, self.end
        if start.kind is BoundKind.INCLUDED and value < start.value:
            return False
        if start.kind is BoundKind.EXCLUDED and value <= start.value:
            return False
        if end.kind is BoundKind.INCLUDED and value > end.value:
            return False
        if end.kind is BoundKind.EXCLUDED and value >= end.value:
            return False
        return True

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def order_key(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """Ranking key: start bound first, then end bound."""
        return (self.start.order_key(), self.end.order_key())

    def __str__(self) -> str:
        start = "" if self.start.is_unbounded else str(self.start.value)
        if self.end.kind is BoundKind.INCLUDED:
            end = f"={self.end.value}"
        elif self.end.kind is BoundKind.EXCLUDED:
            end = str(self.end.value)
        else:
            end = ""
        return f"{start}..{end}"


def compare_ranges(this: Bounded, that: Bounded) -> int:
    """Three-way ranking comparison of two ranges (-1, 0 or 1)."""
    cmp = compare_bounds(this.start, that.start)
    if cmp == 0:
        return compare_bounds(this.end, that.end)
    return cmp
