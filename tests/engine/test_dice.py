"""
Dice Notation - Dice and Die Tests

Face ranges, critical zones, text, sampling and parsing.
"""

import random

import pytest

from src.engine.bounded import Bounded
from src.engine.dice import Dice, DiceType, Die
from src.engine.errors import NotationError
from tests.helpers import ScriptedRandom

STANDARD = [t for t in DiceType if t is not DiceType.OTHER]


class TestFaces:
    """Tests for Dice.faces()."""

    @pytest.mark.parametrize(
        "dice_type, low, high",
        [
            (DiceType.D2, 1, 2),
            (DiceType.D3, 1, 3),
            (DiceType.D4, 1, 4),
            (DiceType.D6, 1, 6),
            (DiceType.D8, 1, 8),
            (DiceType.D10, 1, 10),
            (DiceType.D12, 1, 12),
            (DiceType.D20, 1, 20),
            (DiceType.D100, 1, 100),
            (DiceType.D00, 0, 0),
            (DiceType.FATE, -1, 1),
        ],
    )
    def test_standard_faces(self, dice_type, low, high):
        faces = Dice.of(dice_type).faces()
        assert faces[0] == low
        assert faces[-1] == high

    @pytest.mark.parametrize("dice_type", STANDARD)
    def test_faces_never_empty(self, dice_type):
        faces = Dice.of(dice_type).faces()
        assert len(faces) > 0
        assert faces[0] <= faces[-1]

    def test_other_faces(self):
        assert list(Dice.other(-2, 2).faces()) == [-2, -1, 0, 1, 2]

    def test_other_rejects_empty_range(self):
        with pytest.raises(ValueError, match="Start must not exceed end"):
            Dice.other(5, 4)

    def test_of_rejects_other(self):
        with pytest.raises(ValueError, match="Dice.other"):
            Dice.of(DiceType.OTHER)


class TestCritical:
    """Tests for critical width and default zones."""

    def test_standard_width(self, d6):
        assert d6.critical() == 1

    @pytest.mark.parametrize("dice_type", [DiceType.D100, DiceType.D00])
    def test_percentile_width(self, dice_type):
        assert Dice.of(dice_type).critical() == 5

    def test_other_width(self):
        assert Dice.other(1, 8).critical() == 1

    def test_fate_has_no_zones(self, fate):
        assert fate.critical() is None
        assert fate.start() is None
        assert fate.end() is None

    def test_d6_zones(self, d6):
        assert d6.start() == Bounded.between(1, 1)
        assert d6.end() == Bounded.between(6, 6)

    def test_d100_zones(self):
        dice = Dice.of(DiceType.D100)
        assert dice.start() == Bounded.between(1, 5)
        assert dice.end() == Bounded.between(96, 100)

    def test_other_zones_anchor_on_faces(self):
        dice = Dice.other(3, 9)
        assert dice.start() == Bounded.between(3, 3)
        assert dice.end() == Bounded.between(9, 9)


class TestText:
    """Tests for Dice.text()."""

    def test_single_digit(self, d6):
        assert d6.text(3) == "3"

    def test_two_digits(self, d10):
        assert d10.text(3) == "03"
        assert d10.text(10) == "10"

    def test_three_digits(self):
        assert Dice.of(DiceType.D100).text(7) == "007"
        assert Dice.of(DiceType.D100).text(100) == "100"

    def test_fate_symbols(self, fate):
        assert [fate.text(v) for v in (-1, 0, 1)] == ["-", "0", "+"]

    def test_other_pads_to_upper_bound(self):
        assert Dice.other(1, 12).text(4) == "04"
        assert Dice.other(1, 8).text(4) == "4"


class TestRoll:
    """Tests for sampling."""

    @pytest.mark.parametrize("dice_type", STANDARD)
    def test_roll_within_faces(self, dice_type):
        dice = Dice.of(dice_type)
        rng = random.Random(1234)
        for _ in range(200):
            assert dice.roll(rng) in dice.faces()

    def test_roll_covers_faces(self, d6):
        rng = random.Random(99)
        assert {d6.roll(rng) for _ in range(300)} == set(d6.faces())

    def test_roll_consumes_generator(self, d6):
        rng = ScriptedRandom([4, 2])
        assert [d6.roll(rng), d6.roll(rng), d6.roll(rng)] == [4, 2, 4]

    def test_die_roll_count(self, d6):
        rng = random.Random(7)
        faces = Die(d6, 20).roll(rng)
        assert len(faces) == 20
        assert all(face in d6.faces() for face in faces)

    def test_die_roll_in_order(self):
        rng = ScriptedRandom([1, 2, 3, 4, 5])
        assert Die(Dice.of(DiceType.D100), 5).roll(rng) == [1, 2, 3, 4, 5]

    def test_zero_dice(self, d6):
        assert Die(d6, 0).roll(random.Random()) == []

    def test_die_count_validation(self, d6):
        with pytest.raises(ValueError, match="between 0 and 255"):
            Die(d6, 256)


class TestDiceParse:
    """Tests for Dice.parse()."""

    @pytest.mark.parametrize(
        "text, dice_type",
        [
            ("2", DiceType.D2),
            ("3", DiceType.D3),
            ("4", DiceType.D4),
            ("6", DiceType.D6),
            ("8", DiceType.D8),
            ("10", DiceType.D10),
            ("12", DiceType.D12),
            ("20", DiceType.D20),
            ("100", DiceType.D100),
            ("00", DiceType.D00),
            ("%", DiceType.D00),
            ("F", DiceType.FATE),
            ("Fate", DiceType.FATE),
        ],
    )
    def test_standard(self, text, dice_type):
        assert Dice.parse(text) == Dice.of(dice_type)

    def test_bare_end(self):
        assert Dice.parse("5") == Dice.other(1, 5)
        assert Dice.parse("1") == Dice.other(1, 1)

    def test_range(self):
        assert Dice.parse("1:8") == Dice.other(1, 8)
        assert Dice.parse("-2:2") == Dice.other(-2, 2)

    def test_range_default_start(self):
        assert Dice.parse(":8") == Dice.other(1, 8)

    @pytest.mark.parametrize("text", ["S", "", ":", "a:5", "5:", "1.5", "0", "9:3", "200"])
    def test_invalid(self, text):
        with pytest.raises(NotationError):
            Dice.parse(text)

    def test_error_names_token(self):
        with pytest.raises(NotationError) as info:
            Dice.parse("x7")
        assert info.value.token == "x7"


class TestDieParse:
    """Tests for Die.parse()."""

    def test_default_count(self, d10):
        assert Die.parse("d10") == Die(d10, 1)

    def test_explicit_count(self, d10):
        assert Die.parse("1d10") == Die(d10, 1)
        assert Die.parse("2d10") == Die(d10, 2)

    def test_zero_count(self, d6):
        assert Die.parse("0d6") == Die(d6, 0)

    @pytest.mark.parametrize("text", ["2d", "d", "2", "", "xd6", "256d6"])
    def test_invalid(self, text):
        with pytest.raises(NotationError):
            Die.parse(text)


class TestDisplay:
    """Display text re-parses to an equal value."""

    @pytest.mark.parametrize("dice_type", STANDARD)
    def test_standard_round_trip(self, dice_type):
        dice = Dice.of(dice_type)
        assert Dice.parse(str(dice)) == dice

    @pytest.mark.parametrize("start, end", [(1, 6), (1, 7), (-3, 3), (0, 0)])
    def test_other_round_trip(self, start, end):
        dice = Dice.other(start, end)
        assert Dice.parse(str(dice)) == dice

    def test_die_round_trip(self):
        die = Die(Dice.other(2, 9), 12)
        assert str(die) == "12d2:9"
        assert Die.parse(str(die)) == die

    def test_fate_die_text(self, fate):
        assert str(Die(fate, 4)) == "4dF"
