"""
Dice Notation - Dice and Die

A Dice is one kind of die: its face range and the width of its default
critical zones. A Die is a group of identical dice rolled together.
Both are immutable and are only created by parsing or by the factory
class methods below.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from random import Random

from src.engine.bounded import Bounded
from src.engine.errors import NotationError

logger = logging.getLogger(__name__)

# Faces and counts are stored as signed / unsigned bytes in notation
FACE_MIN = -128
FACE_MAX = 127
COUNT_MAX = 255

_FACE_PATTERN = re.compile(r"-?\d+")
_DIE_PATTERN = re.compile(r"(\d*)d(.*)")


class DiceType(Enum):
    """Kinds of dice. Values are the canonical notation of each kind."""
    D2 = "2"
    D3 = "3"
    D4 = "4"
    D6 = "6"
    D8 = "8"
    D10 = "10"
    D12 = "12"
    D20 = "20"
    D100 = "100"
    D00 = "00"
    FATE = "F"
    OTHER = "other"


_FACES: dict[DiceType, tuple[int, int]] = {
    DiceType.D2: (1, 2),
    DiceType.D3: (1, 3),
    DiceType.D4: (1, 4),
    DiceType.D6: (1, 6),
    DiceType.D8: (1, 8),
    DiceType.D10: (1, 10),
    DiceType.D12: (1, 12),
    DiceType.D20: (1, 20),
    DiceType.D100: (1, 100),
    DiceType.D00: (0, 0),
    DiceType.FATE: (-1, 1),
}

_ALIASES: dict[str, DiceType] = {
    **{t.value: t for t in _FACES},
    "%": DiceType.D00,
    "Fate": DiceType.FATE,
}


def _parse_face(text: str, token: str) -> int:
    if not _FACE_PATTERN.fullmatch(text):
        raise NotationError(f"Invalid face value '{text}' in '{token}'.", token)
    value = int(text)
    if not (FACE_MIN <= value <= FACE_MAX):
        raise NotationError(
            f"Face value {value} in '{token}' must be between {FACE_MIN} and {FACE_MAX}.",
            token,
        )
    return value


@dataclass(frozen=True)
class Dice:
    """
    One kind of die.

    Attributes:
        type: Variant of the die
        low: Lowest face (inclusive)
        high: Highest face (inclusive)
    """
    type: DiceType
    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate the face range is non-empty."""
        if self.low > self.high:
            raise ValueError(
                f"Invalid face range {self.low}:{self.high}. "
                f"Start must not exceed end."
            )

    @classmethod
    def of(cls, dice_type: DiceType) -> "Dice":
        """Create a standard die (anything but OTHER)."""
        if dice_type is DiceType.OTHER:
            raise ValueError("Use Dice.other() for custom face ranges.")
        low, high = _FACES[dice_type]
        return cls(dice_type, low, high)

    @classmethod
    def other(cls, start: int, end: int) -> "Dice":
        """Create a die with an arbitrary face range ``start..=end``."""
        return cls(DiceType.OTHER, start, end)

    @classmethod
    def parse(cls, text: str) -> "Dice":
        """
        Parse the part of the notation after ``d``.

        Accepts ``2 3 4 6 8 10 12 20 100``, ``00`` or ``%``, ``F`` or ``Fate``,
        and custom ranges written ``start:end``, ``:end`` or ``end``
        (start defaults to 1).

        Raises:
            NotationError: If the text is not a valid dice literal
        """
        if text in _ALIASES:
            return cls.of(_ALIASES[text])

        if ":" in text:
            start_text, _, end_text = text.partition(":")
            start = _parse_face(start_text, text) if start_text else 1
        else:
            end_text = text
            start = 1
        end = _parse_face(end_text, text)

        if start > end:
            raise NotationError(
                f"Invalid dice '{text}': range start {start} exceeds end {end}.", text
            )
        return cls.other(start, end)

    def faces(self) -> range:
        """Inclusive face range."""
        return range(self.low, self.high + 1)

    def critical(self) -> int | None:
        """Width of the default critical zones, None for Fate dice."""
        if self.type is DiceType.FATE:
            return None
        if self.type in (DiceType.D100, DiceType.D00):
            return 5
        return 1

    def start(self) -> Bounded | None:
        """Default failure zone at the low end of the faces."""
        width = self.critical()
        if width is None:
            return None
        return Bounded.between(self.low, self.low + width - 1)

    def end(self) -> Bounded | None:
        """Default success zone at the high end of the faces."""
        width = self.critical()
        if width is None:
            return None
        return Bounded.between(self.high - width + 1, self.high)

    def text(self, value: int) -> str:
        """Display text of one face, padded to the width of the highest face."""
        if self.type is DiceType.FATE:
            return {-1: "-", 1: "+"}.get(value, "0")
        if self.high < 10:
            width = 1
        elif self.high < 100:
            width = 2
        else:
            width = 3
        return f"{value:0{width}d}"

    def roll(self, rng: Random) -> int:
        """Draw one face uniformly from the given generator."""
        return rng.randint(self.low, self.high)

    def __str__(self) -> str:
        if self.type is DiceType.OTHER:
            return f"{self.low}:{self.high}"
        return self.type.value


@dataclass(frozen=True)
class Die:
    """
    A group of identical dice.

    Attributes:
        dice: Kind of die
        count: How many are rolled (0-255)
    """
    dice: Dice
    count: int = 1

    def __post_init__(self) -> None:
        """Validate the dice count."""
        if not (0 <= self.count <= COUNT_MAX):
            raise ValueError(f"Dice count must be between 0 and {COUNT_MAX}, got {self.count}.")

    @classmethod
    def parse(cls, text: str) -> "Die":
        """
        Parse ``[count]d<dice>``. A missing count means one die.

        Raises:
            NotationError: If the segment is malformed
        """
        match = _DIE_PATTERN.fullmatch(text)
        if not match:
            raise NotationError(f"Invalid die '{text}'. Expected [count]d<faces>.", text)

        count_text, dice_text = match.groups()
        if not dice_text:
            raise NotationError(f"Die '{text}' is missing its faces.", text)

        count = int(count_text) if count_text else 1
        if count > COUNT_MAX:
            raise NotationError(
                f"Dice count {count} in '{text}' exceeds {COUNT_MAX}.", text
            )
        return cls(dice=Dice.parse(dice_text), count=count)

    def roll(self, rng: Random) -> list[int]:
        """Roll every die in the group, in order."""
        faces = [self.dice.roll(rng) for _ in range(self.count)]
        logger.debug("Rolled %s: %s", self, faces)
        return faces

    def __str__(self) -> str:
        return f"{self.count}d{self.dice}"
