"""
Dice Notation - Roll

Ties a Die, the random generator and the behaviour engine together.
"""

from random import Random
from typing import Iterable

from src.engine.behaviour import Behaviour, BehaviourEngine
from src.engine.dice import Dice, Die
from src.engine.value import Value


class Roll:
    """
    The values produced by rolling one Die.

    The roll owns its list of values; applying behaviours replaces the
    list wholesale.
    """

    def __init__(self, die: Die, values: Iterable[Value]) -> None:
        self.die = die
        self.values = list(values)

    @classmethod
    def from_faces(cls, die: Die, faces: Iterable[int]) -> "Roll":
        """Build a roll from predetermined faces."""
        return cls(die, Value.from_faces(faces))

    @classmethod
    def from_roll(cls, die: Die, rng: Random) -> "Roll":
        """Roll the die once and wrap the faces."""
        return cls.from_faces(die, die.roll(rng))

    @property
    def dice(self) -> Dice:
        return self.die.dice

    def apply(self, behaviours: Iterable[Behaviour], rng: Random) -> "Roll":
        """Run the behaviours over the current values. Returns self."""
        self.values = BehaviourEngine.apply_all(behaviours, self.dice, self.values, rng)
        return self

    def faces(self) -> list[int]:
        """Current face of every value, discarded ones included."""
        return [value.value for value in self.values]

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"Roll(die={self.die}, values={self.values!r})"

    def __str__(self) -> str:
        return " ".join(self.dice.text(value.value) for value in self.values)
