"""Tests for rpgutils.dice."""

from collections import Counter

import pytest

from conftest import ScriptedRandom
from rpgutils.dice import Dice, DicePool, parse_dice, roll_one

# chi-square critical values at p = 0.001
_CHI2_CRITICAL = {5: 20.515, 6: 22.458, 19: 43.820}


def _chi_square(counts: Counter, sides: int, trials: int) -> float:
    expected = trials / sides
    return sum((counts.get(face, 0) - expected) ** 2 / expected for face in range(1, sides + 1))


class TestRollOne:
    def test_stays_in_range(self):
        for sides in (1, 2, 6, 7, 20, 100):
            for _ in range(500):
                assert 1 <= roll_one(sides) <= sides

    def test_one_sided_die(self):
        assert roll_one(1) == 1

    @pytest.mark.parametrize("sides", [6, 7, 20])
    def test_uniform_chi_square(self, sides):
        dice = Dice(seed=20190319 + sides)
        trials = 2000 * sides
        counts = Counter(dice.roll_die(sides) for _ in range(trials))

        assert set(counts) == set(range(1, sides + 1))
        assert _chi_square(counts, sides, trials) < _CHI2_CRITICAL[sides - 1]

    @pytest.mark.parametrize("sides", [0, -3])
    def test_rejects_non_positive_sides(self, sides):
        with pytest.raises(ValueError):
            roll_one(sides)

    def test_rejects_non_int_sides(self):
        with pytest.raises(TypeError):
            roll_one(6.0)

    def test_seeded_dice_are_reproducible(self):
        a = Dice(seed=7)
        b = Dice(seed=7)
        assert [a.roll_die(20) for _ in range(50)] == [b.roll_die(20) for _ in range(50)]


class TestDicePool:
    def test_add_dice_accumulates(self):
        pool = DicePool().add_dice(2, 6).add_dice(1, 8).add_dice(3, 6)
        assert pool.composition == {6: 5, 8: 1}
        assert pool.dice_count == 6

    @pytest.mark.parametrize("count, sides", [(0, 6), (-1, 6), (2, 0), (2, -6)])
    def test_add_dice_rejects_bad_arguments(self, count, sides):
        pool = DicePool()
        with pytest.raises(ValueError):
            pool.add_dice(count, sides)
        assert pool.is_empty

    def test_add_dice_rejects_non_int(self):
        with pytest.raises(TypeError):
            DicePool().add_dice(2.5, 6)

    def test_roll_sum(self, scripted_dice):
        pool = DicePool(dice=scripted_dice(6, 2, 5)).add_dice(3, 6)
        assert pool.roll_sum() == 13

    def test_rolling_does_not_consume_dice(self, seeded_dice):
        pool = DicePool(dice=seeded_dice).add_dice(3, 6)
        for _ in range(20):
            assert 3 <= pool.roll_sum() <= 18
            assert len(pool.roll_each()) == 3
        assert pool.composition == {6: 3}

    def test_roll_each_orders_by_die_size(self):
        rng = ScriptedRandom([3, 4, 7, 2])
        pool = DicePool(dice=Dice(rng=rng)).add_dice(2, 8).add_dice(1, 4).add_dice(1, 6)

        assert pool.roll_each() == [3, 4, 7, 2]
        assert rng.calls == [(1, 4), (1, 6), (1, 8), (1, 8)]

    def test_roll_each_descending(self, scripted_dice):
        pool = DicePool(dice=scripted_dice(3, 6, 1, 6)).add_dice(4, 6)
        assert pool.roll_each_descending() == [6, 6, 3, 1]

    def test_empty_pool(self):
        pool = DicePool()
        assert pool.roll_sum() == 0
        assert pool.roll_each() == []

    def test_from_notation(self):
        pool = DicePool.from_notation("4d6")
        assert pool.composition == {6: 4}
        assert DicePool.from_notation("d20").composition == {20: 1}

    def test_from_notation_rejects_modifier(self):
        with pytest.raises(ValueError):
            DicePool.from_notation("2d6+3")

    def test_repr(self):
        assert repr(DicePool().add_dice(3, 6)) == "DicePool(3d6)"
        assert repr(DicePool()) == "DicePool(empty)"


class TestNotation:
    def test_parse(self):
        expr = parse_dice("2d6 - 1")
        assert (expr.num_dice, expr.sides, expr.modifier) == (2, 6, -1)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_dice("six dice")

    def test_roll_with_modifier(self, scripted_dice):
        result = scripted_dice(4, 5).roll("2d6+3")
        assert result.rolls == [4, 5]
        assert result.total == 12
        assert result.modifier == 3
