"""
Dice Notation - Test Configuration and Fixtures

Common fixtures for all test modules.
"""

from typing import Callable

import pytest

from src.engine.dice import Dice, DiceType
from src.engine.value import Value
from tests.helpers import ScriptedRandom, make_values


# =============================================================================
# DICE
# =============================================================================

@pytest.fixture
def d6() -> Dice:
    return Dice.of(DiceType.D6)


@pytest.fixture
def d10() -> Dice:
    return Dice.of(DiceType.D10)


@pytest.fixture
def fate() -> Dice:
    return Dice.of(DiceType.FATE)


# =============================================================================
# VALUES AND GENERATORS
# =============================================================================

@pytest.fixture
def one_to_six() -> list[Value]:
    """Fresh values 1..6 in ascending order."""
    return make_values([1, 2, 3, 4, 5, 6])


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandom]:
    """Factory for scripted generators: scripted(6, 1) yields 6, 1, 6, 1, ..."""
    def factory(*faces: int) -> ScriptedRandom:
        return ScriptedRandom(faces)
    return factory
