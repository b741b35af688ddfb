"""Generic operations on probability tables."""

from collections import defaultdict
from collections.abc import Sequence
from fractions import Fraction

from src.dice.exceptions import ArithmeticInvariantError
from src.dice.types import ProbabilityTable


def combine_two_tables(table_a: ProbabilityTable, table_b: ProbabilityTable) -> ProbabilityTable:
    """Distribution of the sum of two independent outcomes.

    Examples:
        >>> half = {0: Fraction(1, 2), 1: Fraction(1, 2)}
        >>> combine_two_tables(half, half)
        {0: Fraction(1, 4), 1: Fraction(1, 2), 2: Fraction(1, 4)}
    """
    combined: defaultdict[int, Fraction] = defaultdict(Fraction)
    for outcome_a, prob_a in table_a.items():
        for outcome_b, prob_b in table_b.items():
            combined[outcome_a + outcome_b] += prob_a * prob_b
    return dict(sorted(combined.items()))


def combine_tables(tables: Sequence[ProbabilityTable]) -> ProbabilityTable:
    """Distribution of the sum of any number of independent outcomes.

    No tables give an empty table; a single table is returned as a copy.
    """
    if not tables:
        return {}
    if len(tables) == 1:
        return dict(tables[0])
    return combine_two_tables(tables[0], combine_tables(tables[1:]))


def difference_table(table_a: ProbabilityTable, table_b: ProbabilityTable) -> ProbabilityTable:
    """Pointwise ``table_a - table_b`` for comparing two configurations.

    Every key from 0 to the largest key of either table is present; the
    result may be negative and is not a distribution.

    Examples:
        >>> difference_table({0: Fraction(3, 4), 1: Fraction(1, 4)},
        ...                  {0: Fraction(1, 2), 1: Fraction(1, 2)})
        {0: Fraction(1, 4), 1: Fraction(-1, 4)}
    """
    keys = [*table_a, *table_b]
    if not keys:
        return {}
    return {
        outcome: table_a.get(outcome, Fraction(0)) - table_b.get(outcome, Fraction(0))
        for outcome in range(max(keys) + 1)
    }


def table_total(table: ProbabilityTable) -> Fraction:
    """Sum of all probabilities in a table."""
    return sum(table.values(), Fraction(0))


def check_distribution(table: ProbabilityTable) -> ProbabilityTable:
    """Verify a table is a complete distribution and return it unchanged.

    Raises:
        ArithmeticInvariantError: If any probability is negative or the
            probabilities do not sum to exactly 1.
    """
    for outcome, probability in table.items():
        if probability < 0:
            raise ArithmeticInvariantError(
                f"Negative probability {probability} for outcome {outcome}", value=probability
            )
    total = table_total(table)
    if total != 1:
        raise ArithmeticInvariantError(f"Probabilities sum to {total}, not 1", value=total)
    return table
