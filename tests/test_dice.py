"""Tests for Dice and roll sessions."""

import random

import pytest

from protocol_playground.dice import Dice, roll_session
from protocol_playground.errors import InvalidArgumentError
from protocol_playground.generators.lcg import LinearCongruentialGenerator
from protocol_playground.generators.uniform import OneThroughTen


class TestDiceRoll:
    """Tests for Dice.roll."""

    @pytest.mark.parametrize(
        ("drawn", "expected"),
        [
            (1, 2),
            (10, 5),  # 10 % 6 = 4
            (6, 1),  # wraps around
            (5, 6),
            (0, 1),
        ],
    )
    def test_six_sided_results(self, static_generator, drawn: int, expected: int) -> None:
        dice = Dice(6, static_generator(drawn))
        assert dice.roll() == expected

    @pytest.mark.parametrize("sides", [1, 2, 3, 6, 7, 10, 20, 100])
    def test_results_within_sides(self, one_through_ten_values, sides: int) -> None:
        dice = Dice(sides, one_through_ten_values)
        for _ in range(30):
            assert 1 <= dice.roll() <= sides

    def test_single_sided_always_one(self, one_through_ten_values) -> None:
        dice = Dice(1, one_through_ten_values)
        assert dice.roll_many(10) == [1] * 10

    @pytest.mark.parametrize("drawn", [-1, -6, -7, -139967])
    def test_negative_draws_normalised(self, static_generator, drawn: int) -> None:
        dice = Dice(6, static_generator(drawn))
        assert 1 <= dice.roll() <= 6

    def test_negative_draw_value(self, static_generator) -> None:
        # -1 % 6 == 5
        assert Dice(6, static_generator(-1)).roll() == 6

    def test_each_roll_draws_once(self, static_generator) -> None:
        generator = static_generator(4)
        dice = Dice(6, generator)
        dice.roll()
        dice.roll()
        assert generator.calls == 2

    def test_results_not_cached(self, one_through_ten_values) -> None:
        dice = Dice(6, one_through_ten_values)
        assert [dice.roll() for _ in range(3)] == [2, 3, 4]

    def test_with_one_through_ten(self) -> None:
        dice = Dice(6, OneThroughTen(seed=11))
        assert all(1 <= dice.roll() <= 6 for _ in range(100))

    def test_float_generator_rejected(self) -> None:
        """random.Random.random() returns a float in [0, 1)."""
        dice = Dice(6, random.Random(1))
        with pytest.raises(InvalidArgumentError, match="expected int"):
            dice.roll()

    @pytest.mark.parametrize("drawn", [2.0, True, "3", None])
    def test_non_int_draw_rejected(self, static_generator, drawn) -> None:
        dice = Dice(6, static_generator(drawn))
        with pytest.raises(InvalidArgumentError, match="expected int"):
            dice.roll()

    def test_with_lcg(self) -> None:
        # 52439 % 6 = 5
        assert Dice(6, LinearCongruentialGenerator()).roll() == 6


class TestDiceConstruction:
    """Tests for Dice argument validation."""

    @pytest.mark.parametrize("sides", [0, -1, -6])
    def test_non_positive_sides_rejected(self, static_generator, sides: int) -> None:
        with pytest.raises(InvalidArgumentError, match="positive number of sides"):
            Dice(sides, static_generator(1))

    @pytest.mark.parametrize("sides", [True, 6.0, "6", None])
    def test_non_integer_sides_rejected(self, static_generator, sides) -> None:
        with pytest.raises(InvalidArgumentError):
            Dice(sides, static_generator(1))

    def test_generator_without_random_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="does not provide random"):
            Dice(6, object())

    def test_rejection_happens_before_any_draw(self, static_generator) -> None:
        generator = static_generator(1)
        with pytest.raises(InvalidArgumentError):
            Dice(0, generator)
        assert generator.calls == 0

    def test_properties(self, static_generator) -> None:
        generator = static_generator(1)
        dice = Dice(20, generator)
        assert dice.sides == 20
        assert dice.generator is generator

    def test_properties_are_read_only(self, static_generator) -> None:
        dice = Dice(6, static_generator(1))
        with pytest.raises(AttributeError):
            dice.sides = 8


class TestRollMany:
    """Tests for Dice.roll_many and roll_session."""

    def test_roll_many(self, one_through_ten_values) -> None:
        dice = Dice(6, one_through_ten_values)
        assert dice.roll_many(5) == [2, 3, 4, 5, 6]

    def test_zero_trials(self, static_generator) -> None:
        generator = static_generator(3)
        assert Dice(6, generator).roll_many(0) == []
        assert generator.calls == 0

    def test_negative_trials_rejected(self, static_generator) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            Dice(6, static_generator(3)).roll_many(-1)

    def test_roll_session(self, one_through_ten_values) -> None:
        session = roll_session(Dice(6, one_through_ten_values), 5, "sequence")
        assert session.sides == 6
        assert session.generator == "sequence"
        assert session.rolls == [2, 3, 4, 5, 6]
        assert session.total == 20


def test_dice_demo(capsys) -> None:
    """Test the module demo rolls both generators and reports zero sides."""
    from protocol_playground import dice

    dice.main()
    out = capsys.readouterr().out
    assert out.count("Random dice roll is") == 10
    assert "positive number of sides" in out
