"""Tests for blast expansion."""

from fractions import Fraction

from src.dice.blast import apply_blast
from src.dice.types import BlastSpec


class TestApplyBlast:
    """Tests for apply_blast function."""

    def test_zero_hits_stay_zero(self):
        """Test that no hits never blast."""
        assert apply_blast({0: Fraction(1)}, 0, BlastSpec(dice=6)) == {0: Fraction(1)}

    def test_flat_plus(self, coin_table):
        """Test a flat blast multiplies each hit."""
        assert apply_blast(coin_table, 1, BlastSpec(plus=2)) == {
            0: Fraction(1, 2),
            1: Fraction(0),
            2: Fraction(1, 2),
        }

    def test_output_spans_max_blast(self, coin_table):
        """Test the table covers 0..attack * (dice + plus)."""
        table = apply_blast(coin_table, 1, BlastSpec(dice=6, plus=1))
        assert list(table) == list(range(8))

    def test_empty_blast(self, coin_table):
        """Test an empty blast collapses every hit to 0."""
        assert apply_blast(coin_table, 1, BlastSpec()) == {0: Fraction(1)}

    def test_input_not_mutated(self, coin_table):
        """Test the input table is left unchanged."""
        before = dict(coin_table)
        apply_blast(coin_table, 1, BlastSpec(dice=3))
        assert coin_table == before

    def test_sums_to_one(self):
        """Test blast keeps a complete distribution."""
        hits = {0: Fraction(1, 8), 1: Fraction(3, 8), 2: Fraction(3, 8), 3: Fraction(1, 8)}
        assert sum(apply_blast(hits, 3, BlastSpec(dice=3, plus=1)).values()) == 1
