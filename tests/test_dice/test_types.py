"""Tests for probability engine types."""

from dataclasses import FrozenInstanceError
from fractions import Fraction

import pytest

from src.dice.exceptions import InvalidParameterError
from src.dice.types import (
    FEARLESS,
    BlastSpec,
    DicePlusNumber,
    HitsParams,
    Nerve,
    NerveTestResult,
    RerollModifier,
    WoundsParams,
)


class TestDicePlusNumber:
    """Tests for DicePlusNumber dataclass."""

    def test_defaults(self):
        """Test the default is a flat 0."""
        value = DicePlusNumber()
        assert value.dice is None
        assert value.plus == 0

    def test_is_immutable(self):
        """Test that DicePlusNumber is frozen."""
        value = DicePlusNumber(dice=3)
        with pytest.raises(FrozenInstanceError):
            value.plus = 2

    @pytest.mark.parametrize(
        "value,expected",
        [(DicePlusNumber(plus=2), "2"), (DicePlusNumber(dice=3), "D3"), (DicePlusNumber(dice=6, plus=1), "D6+1")],
    )
    def test_str(self, value, expected):
        """Test notation round trip for display."""
        assert str(value) == expected

    def test_unsupported_die_rejected(self):
        """Test that a D4 is refused."""
        with pytest.raises(InvalidParameterError):
            DicePlusNumber(dice=4)

    def test_negative_plus_rejected(self):
        """Test that a negative bonus is refused."""
        with pytest.raises(InvalidParameterError):
            DicePlusNumber(plus=-1)


class TestBlastSpec:
    """Tests for BlastSpec dataclass."""

    def test_max_per_hit(self):
        """Test D6+1 turns a hit into at most 7."""
        assert BlastSpec(dice=6, plus=1).max_per_hit == 7

    def test_empty_blast(self):
        """Test an empty blast turns a hit into at most 0."""
        assert BlastSpec().max_per_hit == 0

    def test_unsupported_die_rejected(self):
        """Test that a D8 blast is refused."""
        with pytest.raises(InvalidParameterError):
            BlastSpec(dice=8)


class TestHitsParams:
    """Tests for HitsParams dataclass."""

    def test_defaults(self):
        """Test optional fields default to no rules."""
        params = HitsParams(attack=10, melee=4)
        assert params.elite is False
        assert params.rerolls == ()
        assert params.blast is None

    def test_rerolls_stored_as_tuple(self):
        """Test a list of rerolls is frozen into a tuple."""
        reroll = RerollModifier(DicePlusNumber(plus=1))
        params = HitsParams(attack=1, melee=4, rerolls=[reroll])
        assert params.rerolls == (reroll,)

    def test_negative_attack_rejected(self):
        """Test that negative attacks are refused."""
        with pytest.raises(InvalidParameterError, match="attack"):
            HitsParams(attack=-1, melee=4)

    @pytest.mark.parametrize("melee", [1, 7])
    def test_melee_out_of_range_rejected(self, melee):
        """Test that melee outside 2..6 is refused."""
        with pytest.raises(InvalidParameterError, match="melee"):
            HitsParams(attack=1, melee=melee)


class TestWoundsParams:
    """Tests for WoundsParams dataclass."""

    def test_defense_out_of_range_rejected(self):
        """Test that defense outside 2..6 is refused."""
        with pytest.raises(InvalidParameterError, match="defense"):
            WoundsParams(hits_table={0: Fraction(1)}, defense=7)


class TestNerve:
    """Tests for Nerve dataclass."""

    @pytest.mark.parametrize("waver", [FEARLESS, 0, None])
    def test_fearless_values(self, waver):
        """Test every fearless spelling never wavers."""
        assert Nerve(rout=14, waver=waver).is_fearless

    def test_waver_threshold(self):
        """Test a numeric waver is not fearless."""
        assert not Nerve(rout=14, waver=12).is_fearless


class TestNerveTestResult:
    """Tests for NerveTestResult dataclass."""

    def test_zero(self):
        """Test the empty accumulator."""
        assert NerveTestResult.zero().total == 0

    def test_add(self):
        """Test outcomes add component-wise."""
        result = NerveTestResult(steady=Fraction(1, 2)) + NerveTestResult(rout=Fraction(1, 2))
        assert result == NerveTestResult(steady=Fraction(1, 2), rout=Fraction(1, 2))
        assert result.total == 1

    def test_scaled(self):
        """Test scaling by a probability."""
        result = NerveTestResult(steady=Fraction(1, 2), waver=Fraction(1, 2)).scaled(Fraction(1, 2))
        assert result == NerveTestResult(steady=Fraction(1, 4), waver=Fraction(1, 4))

    def test_as_dict_order(self):
        """Test outcome names come out in steady/waver/rout order."""
        assert list(NerveTestResult.zero().as_dict()) == ["steady", "waver", "rout"]
