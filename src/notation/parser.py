"""
Dice Notation - Parser

Turns notation such as ``20d10r1`` or ``4d6!k3`` into a Die and a list of
Behaviours.

Grammar:
    roll      := die behaviour*
    die       := count? 'd' faces
    faces     := number | '%' | '00' | 'F' | 'Fate' | start? ':' end
    behaviour := 'r' N?             reroll once, faces <= N
               | 'rr' N?            reroll until the face escapes
               | ('!'|'x') kind? N? explode, faces >= N
               | 'cs' N? | 'cf' N?  critical success / failure zones
               | 'k' ('h'|'l')? N   keep (default high)
               | 'd' ('h'|'l')? N   drop (default low)
    kind      := '!' | 'c' (compound) | 'p' (penetrating)

Behaviours may appear in any order; execution order is decided by the
engine. Parsing is all-or-nothing.
"""

import logging
import re

from src.engine.behaviour import (
    Behaviour,
    Critical,
    Direction,
    Drop,
    Explode,
    Keep,
    Reroll,
)
from src.engine.bounded import Bounded
from src.engine.dice import COUNT_MAX, FACE_MAX, FACE_MIN, Die
from src.engine.errors import NotationError
from src.engine.value import ExplosionKind

logger = logging.getLogger(__name__)

_DIE = re.compile(r"\d*d(?:%|Fate|F|-?\d*:-?\d+|\d+)")
# A 'c' after an explosion marker is a compound kind unless it starts cs/cf
_BEHAVIOUR = re.compile(r"(rr?|[!x](?:!|p|c(?![sf]))?|c[sf]|[kd][hl]?)(-?\d+)?")
_UNKNOWN = re.compile(r"[^\d\-]*-?\d*")

_EXPLOSION_KINDS: dict[str, ExplosionKind] = {
    "": ExplosionKind.STANDARD,
    "!": ExplosionKind.COMPOUND,
    "c": ExplosionKind.COMPOUND,
    "p": ExplosionKind.PENETRATING,
}

_DIRECTIONS: dict[str, Direction] = {
    "h": Direction.HIGH,
    "l": Direction.LOW,
}


def tokenize(notation: str) -> tuple[str, list[str]]:
    """
    Split notation into the die segment and raw behaviour tokens.

    Args:
        notation: Full dice notation

    Returns:
        Tuple of (die_text, behaviour_tokens)

    Raises:
        NotationError: If the notation is empty or contains text that is
            not a behaviour
    """
    text = notation.strip()
    if not text:
        raise NotationError("Dice notation is empty.", notation)

    die_match = _DIE.match(text)
    if not die_match:
        # Let the die parser describe what is wrong with the segment
        Die.parse(text)
        raise NotationError(f"Invalid die in '{text}'.", text)

    tokens = []
    pos = die_match.end()
    while pos < len(text):
        match = _BEHAVIOUR.match(text, pos)
        if not match:
            bad = _UNKNOWN.match(text, pos).group(0) or text[pos:]
            raise NotationError(f"Unknown behaviour '{bad}' in '{text}'.", bad)
        tokens.append(match.group(0))
        pos = match.end()

    return die_match.group(0), tokens


def _parse_number(text: str, token: str, low: int, high: int) -> int:
    value = int(text)
    if not (low <= value <= high):
        raise NotationError(
            f"Number {value} in '{token}' must be between {low} and {high}.", token
        )
    return value


def parse_behaviour(token: str) -> Behaviour:
    """
    Parse one behaviour token such as ``r1``, ``!p``, ``cs19`` or ``kh3``.

    Raises:
        NotationError: If the token is not a valid behaviour
    """
    match = _BEHAVIOUR.fullmatch(token)
    if not match:
        raise NotationError(f"Unknown behaviour '{token}'.", token)

    prefix, number_text = match.groups()
    lead = prefix[0]

    if lead in "kd":
        if number_text is None:
            raise NotationError(f"Behaviour '{token}' needs a count.", token)
        count = _parse_number(number_text, token, 0, COUNT_MAX)
        if lead == "k":
            return Keep(count, _DIRECTIONS.get(prefix[1:], Direction.HIGH))
        return Drop(count, _DIRECTIONS.get(prefix[1:], Direction.LOW))

    point = None
    if number_text is not None:
        point = _parse_number(number_text, token, FACE_MIN, FACE_MAX)

    if lead == "r":
        return Reroll(
            Bounded.range_to(point) if point is not None else None,
            repeat=prefix == "rr",
        )
    if prefix == "cs":
        return Critical(success=Bounded.range_from(point) if point is not None else None)
    if prefix == "cf":
        return Critical(failure=Bounded.range_to(point) if point is not None else None)

    return Explode(
        Bounded.range_from(point) if point is not None else None,
        _EXPLOSION_KINDS[prefix[1:]],
    )


def _merge_critical(first: Critical, second: Critical) -> Critical:
    """Combine critical overrides; later zones win."""
    return Critical(
        failure=second.failure if second.failure is not None else first.failure,
        success=second.success if second.success is not None else first.success,
    )


def parse_roll(notation: str) -> tuple[Die, list[Behaviour]]:
    """
    Parse full notation into a Die and its behaviours.

    All critical overrides (``cs``/``cf``) are merged into one Critical
    behaviour. Nothing is rolled here.

    Raises:
        NotationError: If any part of the notation is malformed
    """
    die_text, tokens = tokenize(notation)
    die = Die.parse(die_text)

    behaviours: list[Behaviour] = []
    critical_at = None
    for token in tokens:
        behaviour = parse_behaviour(token)
        if isinstance(behaviour, Critical):
            if critical_at is None:
                critical_at = len(behaviours)
                behaviours.append(behaviour)
            else:
                behaviours[critical_at] = _merge_critical(behaviours[critical_at], behaviour)
            continue
        behaviours.append(behaviour)

    logger.debug("Parsed %r as %s with %s", notation, die, [str(b) for b in behaviours])
    return die, behaviours
