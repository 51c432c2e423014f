"""Test doubles and small helpers shared across test modules."""

import itertools
import random
from typing import Iterable

from src.engine.value import Action, Value


class ScriptedRandom(random.Random):
    """
    Generator returning predetermined faces in order, cycling at the end.

    Only randint() is scripted; every face must fit the requested range.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = itertools.cycle(list(faces))
        super().__init__(0)

    def randint(self, a: int, b: int) -> int:
        face = next(self._faces)
        assert a <= face <= b, f"scripted face {face} outside {a}..{b}"
        return face


def make_values(faces: Iterable[int]) -> list[Value]:
    return Value.from_faces(faces)


def first_actions(values: list[Value]) -> list[Action | None]:
    """First logged action of each value (None when the log is empty)."""
    return [v.actions[0] if v.actions else None for v in values]


def discarded(values: list[Value]) -> list[bool]:
    return [v.is_discarded for v in values]
