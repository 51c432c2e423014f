"""
Dice Notation - Rolled Values and Action Log

A Value is one rolled face plus the append-only history of what the
behaviours did to it. Values are never changed in place: every
transformation returns a new Value.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable


class ExplosionKind(Enum):
    """How an exploding die combines its extra rolls."""
    STANDARD = 1     # replace with the new roll
    COMPOUND = 2     # add the new roll to the running total
    PENETRATING = 3  # replace with the new roll minus one


class ActionType(Enum):
    """Kinds of entry in a value's action log."""
    DISCARD = auto()
    REROLL = auto()
    EXPLODE = auto()
    FAILURE = auto()
    SUCCESS = auto()


@dataclass(frozen=True)
class Action:
    """
    One entry in a value's history.

    Attributes:
        type: What happened
        previous: Face before a reroll or explosion (compound increments
            record the rolled face instead)
        explosion: Explosion kind, for EXPLODE entries only
    """
    type: ActionType
    previous: int | None = None
    explosion: ExplosionKind | None = None

    @classmethod
    def discard(cls) -> "Action":
        return cls(ActionType.DISCARD)

    @classmethod
    def reroll(cls, previous: int) -> "Action":
        return cls(ActionType.REROLL, previous)

    @classmethod
    def explode(cls, previous: int, kind: ExplosionKind) -> "Action":
        return cls(ActionType.EXPLODE, previous, kind)

    @classmethod
    def failure(cls) -> "Action":
        return cls(ActionType.FAILURE)

    @classmethod
    def success(cls) -> "Action":
        return cls(ActionType.SUCCESS)

    def __repr__(self) -> str:
        if self.type is ActionType.EXPLODE:
            return f"Explode({self.previous}, {self.explosion.name.title()})"
        if self.type is ActionType.REROLL:
            return f"Reroll({self.previous})"
        return self.type.name.title()


@dataclass(frozen=True)
class Value:
    """
    A rolled face and its action log.

    Attributes:
        value: Current face (or running total for compound explosions)
        actions: Everything that happened to this face, oldest first
    """
    value: int
    actions: tuple[Action, ...] = field(default_factory=tuple)

    @classmethod
    def from_faces(cls, faces: Iterable[int]) -> list["Value"]:
        """Wrap raw faces as fresh values with empty logs."""
        return [cls(face) for face in faces]

    def add(self, action: Action) -> "Value":
        """Return a copy with the action appended."""
        return Value(self.value, self.actions + (action,))

    def update(self, value: int, action: Action) -> "Value":
        """Return a copy showing a new face, with the action appended."""
        return Value(value, self.actions + (action,))

    def has(self, action_type: ActionType) -> bool:
        return any(action.type is action_type for action in self.actions)

    @property
    def is_discarded(self) -> bool:
        return self.has(ActionType.DISCARD)

    @property
    def is_failure(self) -> bool:
        return self.has(ActionType.FAILURE)

    @property
    def is_success(self) -> bool:
        return self.has(ActionType.SUCCESS)

    def previous(self, action_type: ActionType) -> list[int]:
        """Recorded faces of every action of the given type."""
        return [a.previous for a in self.actions if a.type is action_type]
