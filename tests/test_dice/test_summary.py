"""Tests for table summaries."""

from fractions import Fraction

from src.dice.summary import at_least_table, expected_value, to_percentages


TWO_COINS = {0: Fraction(1, 4), 1: Fraction(1, 2), 2: Fraction(1, 4)}


class TestExpectedValue:
    """Tests for expected_value function."""

    def test_two_coins(self):
        """Test two fair coins average one."""
        assert expected_value(TWO_COINS) == 1

    def test_empty(self):
        """Test an empty table averages zero."""
        assert expected_value({}) == 0


class TestAtLeastTable:
    """Tests for at_least_table function."""

    def test_two_coins(self):
        """Test cumulative chances from the top."""
        assert at_least_table(TWO_COINS) == {
            0: Fraction(1),
            1: Fraction(3, 4),
            2: Fraction(1, 4),
        }

    def test_keys_ascending(self):
        """Test the result is ordered by outcome."""
        assert list(at_least_table({2: Fraction(1, 2), 0: Fraction(1, 2)})) == [0, 2]


class TestToPercentages:
    """Tests for to_percentages function."""

    def test_rounding(self):
        """Test percentages are rounded for display."""
        assert to_percentages({0: Fraction(1, 3), 1: Fraction(2, 3)}, decimals=1) == {0: 33.3, 1: 66.7}
