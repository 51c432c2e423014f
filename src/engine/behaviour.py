"""
Dice Notation - Behaviour Engine

Behaviours are the post-roll rules of a notation (reroll, explode,
critical marking, keep, drop). They are immutable records; evaluation is
done by the stateless BehaviourEngine.

Execution order matters and is fixed regardless of how the rules were
written: rerolls and explosions settle the final faces, critical marking
reads them, and keep/drop run last (keep before drop) over whatever is
still undiscarded. That order is the natural sort order of behaviours:

    Reroll(no point) < Reroll(point) < Explode < Critical < Keep < Drop
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering
from random import Random
from typing import ClassVar, Iterable, Sequence

from src.engine.bounded import Bound, Bounded, BoundKind
from src.engine.dice import Dice
from src.engine.value import Action, ExplosionKind, Value

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Which end of the sorted faces a keep/drop selects."""
    HIGH = 1
    LOW = 2


class DiscardType(Enum):
    """Whether the selected faces are kept or dropped."""
    KEEP = auto()
    DROP = auto()


_EXPLOSION_PREFIX: dict[ExplosionKind, str] = {
    ExplosionKind.STANDARD: "",
    ExplosionKind.COMPOUND: "!",
    ExplosionKind.PENETRATING: "p",
}


def _point_key(point: Bounded | None) -> tuple:
    """Ranking key of an optional point: no point ranks first."""
    if point is None:
        return (0,)
    return (1, point.order_key())


def _anchor(bound: Bound) -> str:
    return "" if bound.kind is BoundKind.UNBOUNDED else str(bound.value)


@total_ordering
class Behaviour:
    """
    Base of all behaviours.

    Subclasses are frozen dataclasses; RANK places the variant in the
    execution order and sort_key() breaks ties inside a variant.
    """

    RANK: ClassVar[int]

    def sort_key(self) -> tuple:
        raise NotImplementedError

    def __lt__(self, other: "Behaviour") -> bool:
        if not isinstance(other, Behaviour):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True, eq=True)
class Reroll(Behaviour):
    """
    Reroll faces inside a trigger zone.

    Attributes:
        point: Trigger zone, defaults to the die's failure zone
        repeat: Keep rerolling until the face leaves the zone
    """
    point: Bounded | None = None
    repeat: bool = False

    RANK: ClassVar[int] = 0

    def sort_key(self) -> tuple:
        return (self.RANK, _point_key(self.point), self.repeat)

    def __str__(self) -> str:
        prefix = "rr" if self.repeat else "r"
        return prefix + (_anchor(self.point.end) if self.point else "")


@dataclass(frozen=True, eq=True)
class Explode(Behaviour):
    """
    Roll again while a face lands inside a trigger zone.

    Attributes:
        point: Trigger zone, defaults to the die's success zone
        kind: How extra rolls combine with the face
    """
    point: Bounded | None = None
    kind: ExplosionKind = ExplosionKind.STANDARD

    RANK: ClassVar[int] = 1

    def sort_key(self) -> tuple:
        return (self.RANK, _point_key(self.point), self.kind.value)

    def __str__(self) -> str:
        suffix = _anchor(self.point.start) if self.point else ""
        return f"!{_EXPLOSION_PREFIX[self.kind]}{suffix}"


@dataclass(frozen=True, eq=True)
class Critical(Behaviour):
    """
    Mark faces as critical failures or successes.

    Attributes:
        failure: Failure zone, defaults to the die's failure zone
        success: Success zone, defaults to the die's success zone
    """
    failure: Bounded | None = None
    success: Bounded | None = None

    RANK: ClassVar[int] = 2

    def sort_key(self) -> tuple:
        return (self.RANK, _point_key(self.failure), _point_key(self.success))

    def __str__(self) -> str:
        parts = []
        if self.failure is not None:
            parts.append(f"cf{_anchor(self.failure.end)}")
        if self.success is not None or not parts:
            parts.append(f"cs{_anchor(self.success.start) if self.success else ''}")
        return "".join(parts)


@dataclass(frozen=True, eq=True)
class Keep(Behaviour):
    """
    Keep the highest or lowest faces, discarding the rest.

    Attributes:
        count: How many faces to keep
        direction: Which end to keep
    """
    count: int
    direction: Direction = Direction.HIGH

    RANK: ClassVar[int] = 3

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Keep count cannot be negative, got {self.count}.")

    def sort_key(self) -> tuple:
        return (self.RANK, self.count, self.direction.value)

    def __str__(self) -> str:
        return f"k{self.direction.name[0].lower()}{self.count}"


@dataclass(frozen=True, eq=True)
class Drop(Behaviour):
    """
    Discard the highest or lowest faces.

    Attributes:
        count: How many faces to discard
        direction: Which end to discard
    """
    count: int
    direction: Direction = Direction.LOW

    RANK: ClassVar[int] = 4

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Drop count cannot be negative, got {self.count}.")

    def sort_key(self) -> tuple:
        return (self.RANK, self.count, self.direction.value)

    def __str__(self) -> str:
        return f"d{self.direction.name[0].lower()}{self.count}"


class BehaviourEngine:
    """
    Stateless evaluator for behaviours.

    Every method takes the current values and returns a new list of the
    same length. The generator is consumed in value order, so the result
    is a deterministic function of the inputs and the generator state.
    """

    @classmethod
    def apply(
        cls,
        behaviour: Behaviour,
        dice: Dice,
        values: Sequence[Value],
        rng: Random,
    ) -> list[Value]:
        """Apply a single behaviour."""
        logger.debug("Applying %s to %d values", behaviour, len(values))

        if isinstance(behaviour, Reroll):
            return cls.apply_reroll(behaviour.point, behaviour.repeat, dice, values, rng)
        if isinstance(behaviour, Explode):
            return cls.apply_explode(behaviour.point, behaviour.kind, dice, values, rng)
        if isinstance(behaviour, Critical):
            return cls.apply_critical(behaviour.failure, behaviour.success, dice, values)
        if isinstance(behaviour, Keep):
            return cls.apply_discard(behaviour.count, DiscardType.KEEP, behaviour.direction, values)
        if isinstance(behaviour, Drop):
            return cls.apply_discard(behaviour.count, DiscardType.DROP, behaviour.direction, values)
        raise TypeError(f"Unknown behaviour {behaviour!r}")

    @classmethod
    def apply_all(
        cls,
        behaviours: Iterable[Behaviour],
        dice: Dice,
        values: Sequence[Value],
        rng: Random,
    ) -> list[Value]:
        """Apply every behaviour in execution order, not notation order."""
        result = list(values)
        for behaviour in sorted(behaviours):
            result = cls.apply(behaviour, dice, result, rng)
        return result

    @classmethod
    def apply_reroll(
        cls,
        point: Bounded | None,
        repeat: bool,
        dice: Dice,
        values: Sequence[Value],
        rng: Random,
    ) -> list[Value]:
        """
        Reroll faces inside the trigger zone.

        With repeat the face is rerolled until it leaves the zone; a zone
        covering every face never terminates.
        """
        zone = point if point is not None else dice.start()
        if zone is None:
            return list(values)

        result = []
        for value in values:
            while zone.contains(value.value):
                value = value.update(dice.roll(rng), Action.reroll(value.value))
                if not repeat:
                    break
            result.append(value)
        return result

    @classmethod
    def apply_explode(
        cls,
        point: Bounded | None,
        kind: ExplosionKind,
        dice: Dice,
        values: Sequence[Value],
        rng: Random,
    ) -> list[Value]:
        """
        Roll again while the checked face is inside the trigger zone.

        Standard and penetrating explosions check the face they just
        produced. Compound explosions check the newly rolled face, not the
        accumulated total.
        """
        zone = point if point is not None else dice.end()
        if zone is None:
            return list(values)

        lowest = dice.faces()[0]
        result = []
        for value in values:
            face = value.value
            first = True
            while zone.contains(face):
                face = dice.roll(rng)
                if kind is ExplosionKind.STANDARD:
                    value = value.update(face, Action.explode(value.value, kind))
                elif kind is ExplosionKind.PENETRATING:
                    face = max(face - 1, lowest)
                    value = value.update(face, Action.explode(value.value, kind))
                else:
                    if first:
                        value = value.add(Action.explode(value.value, kind))
                    value = value.update(value.value + face, Action.explode(face, kind))
                first = False
            result.append(value)
        return result

    @classmethod
    def apply_critical(
        cls,
        failure: Bounded | None,
        success: Bounded | None,
        dice: Dice,
        values: Sequence[Value],
    ) -> list[Value]:
        """Mark faces as failures or successes; failure wins a tie."""
        failure_zone = failure if failure is not None else dice.start()
        success_zone = success if success is not None else dice.end()

        result = []
        for value in values:
            if failure_zone is not None and failure_zone.contains(value.value):
                value = value.add(Action.failure())
            elif success_zone is not None and success_zone.contains(value.value):
                value = value.add(Action.success())
            result.append(value)
        return result

    @classmethod
    def apply_discard(
        cls,
        count: int,
        discard: DiscardType,
        direction: Direction,
        values: Sequence[Value],
    ) -> list[Value]:
        """
        Keep or drop ``count`` faces from the high or low end.

        Only undiscarded values take part, so consecutive keeps and drops
        compose. Duplicate faces are matched one instance at a time.
        """
        faces = sorted(v.value for v in values if not v.is_discarded)
        if direction is Direction.HIGH:
            faces.reverse()

        selected = faces[:count] if discard is DiscardType.DROP else faces[count:]
        pending = Counter(selected)

        result = []
        for value in values:
            if not value.is_discarded and pending[value.value] > 0:
                pending[value.value] -= 1
                value = value.add(Action.discard())
            result.append(value)
        return result
