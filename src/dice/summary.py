"""Summaries of probability tables for display."""

from fractions import Fraction

from src.dice.types import ProbabilityTable


def expected_value(table: ProbabilityTable) -> Fraction:
    """Exact mean outcome of a distribution.

    Examples:
        >>> expected_value({0: Fraction(1, 2), 1: Fraction(1, 2)})
        Fraction(1, 2)
    """
    return sum((outcome * probability for outcome, probability in table.items()), Fraction(0))


def at_least_table(table: ProbabilityTable) -> ProbabilityTable:
    """Chance of getting each outcome or more.

    Examples:
        >>> at_least_table({0: Fraction(1, 4), 1: Fraction(1, 2), 2: Fraction(1, 4)})
        {0: Fraction(1, 1), 1: Fraction(3, 4), 2: Fraction(1, 4)}
    """
    result: ProbabilityTable = {}
    running = Fraction(0)
    for outcome in sorted(table, reverse=True):
        running += table[outcome]
        result[outcome] = running
    return dict(sorted(result.items()))


def to_percentages(table: ProbabilityTable, decimals: int = 2) -> dict[int, float]:
    """Rounded percentages; for display only, never feed back into the engine."""
    return {outcome: round(float(probability * 100), decimals) for outcome, probability in table.items()}
