"""
Dice Notation Engine.

Pure Python dice logic with zero UI/configuration dependencies.
Handles dice, rolling, behaviour evaluation and outcomes.
"""

from src.engine.behaviour import (
    Behaviour,
    BehaviourEngine,
    Critical,
    Direction,
    DiscardType,
    Drop,
    Explode,
    Keep,
    Reroll,
)
from src.engine.bounded import Bound, BoundKind, Bounded
from src.engine.dice import Dice, DiceType, Die
from src.engine.errors import NotationError
from src.engine.outcome import Match, Outcome, Target, Total
from src.engine.roll import Roll
from src.engine.value import Action, ActionType, ExplosionKind, Value

__all__ = [
    # Data Classes
    "Action",
    "Bound",
    "Bounded",
    "Dice",
    "Die",
    "Value",
    # Behaviours
    "Behaviour",
    "Critical",
    "Drop",
    "Explode",
    "Keep",
    "Reroll",
    # Enums
    "ActionType",
    "BoundKind",
    "DiceType",
    "Direction",
    "DiscardType",
    "ExplosionKind",
    # Engines
    "BehaviourEngine",
    "Roll",
    # Outcomes
    "Outcome",
    "Match",
    "Target",
    "Total",
    # Errors
    "NotationError",
]
