"""Terminal rendering of rolls: ANSI-styled text for one line of output."""

from __future__ import annotations

from src.engine.dice import Dice
from src.engine.roll import Roll
from src.engine.value import ActionType, Value

RESET = "\x1b[0m"

_SGR: dict[str, str] = {
    "bold": "1",
    "dim": "2",
    "strikethrough": "9",
    "red": "31",
    "green": "32",
}


def styled(text: str, *styles: str, color: bool = True) -> str:
    """Wrap text in SGR escape codes. No-op when color is off."""
    if not color or not styles:
        return text
    codes = ";".join(_SGR[style] for style in styles)
    return f"\x1b[{codes}m{text}{RESET}"


def _history(faces: list[int], dice: Dice, styles: tuple[str, ...], color: bool) -> str:
    if not faces:
        return ""
    inner = " ".join(styled(dice.text(face), *styles, color=color) for face in faces)
    return f"({inner})"


def render_value(value: Value, dice: Dice, color: bool = True) -> str:
    """Render one value with its history.

    Rerolled faces come first in parentheses, struck through. Exploded
    faces follow in parentheses, in bold. The live face is struck through
    when discarded, red for a failure, green for a success and bold green
    when it exploded.

    Args:
        value: The value to render.
        dice: Die kind, for padding and Fate symbols.
        color: Emit ANSI escape codes.
    """
    rerolls = value.previous(ActionType.REROLL)
    explosions = value.previous(ActionType.EXPLODE)

    styles: list[str] = []
    if value.is_discarded:
        styles.append("strikethrough")
    if explosions:
        styles.extend(["green", "bold"])
    elif value.is_failure:
        styles.append("red")
    elif value.is_success:
        styles.append("green")

    before = _history(rerolls, dice, ("dim", "strikethrough"), color)
    after = _history(explosions, dice, ("bold",), color)
    return before + styled(dice.text(value.value), *styles, color=color) + after


def render_roll(roll: Roll, color: bool = True) -> str:
    """Render every value of a roll, separated by single spaces."""
    return " ".join(render_value(value, roll.dice, color) for value in roll.values)
