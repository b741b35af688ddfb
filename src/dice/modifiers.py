"""Mixture tables for reroll rules and nerve modifiers.

Each DicePlusNumber becomes a small outcome table. Reroll rules add up
(every rule lets more dice be rerolled); nerve modifiers keep only the
worst (largest) value rolled.
"""

import logging
import operator
from collections import defaultdict
from collections.abc import Callable, Iterable
from fractions import Fraction

from src.dice.types import DicePlusNumber, ProbabilityTable, RerollModifier

logger = logging.getLogger(__name__)


def dice_plus_number_table(value: DicePlusNumber) -> ProbabilityTable:
    """Distribution of a single DicePlusNumber.

    Examples:
        >>> dice_plus_number_table(DicePlusNumber(dice=3, plus=1))
        {2: Fraction(1, 3), 3: Fraction(1, 3), 4: Fraction(1, 3)}
        >>> dice_plus_number_table(DicePlusNumber(plus=2))
        {2: Fraction(1, 1)}
    """
    if not value.dice:
        return {value.plus: Fraction(1)}
    return {
        result + value.plus: Fraction(1, value.dice)
        for result in range(1, value.dice + 1)
    }


def combine_rerolls(rerolls: Iterable[RerollModifier]) -> ProbabilityTable:
    """Distribution of the total number of dice that may be rerolled.

    Args:
        rerolls: Reroll rules; each contributes independently.

    Returns:
        Table of reroll count -> probability. No rules means no rerolls.
    """
    tables = [dice_plus_number_table(reroll.amount) for reroll in rerolls]
    return _fold_tables(tables, operator.add)


def combine_nerve_modifiers(modifiers: Iterable[DicePlusNumber]) -> ProbabilityTable:
    """Distribution of the largest nerve modifier rolled.

    Each modifier is rolled independently and only the worst result for
    the defender applies.

    Args:
        modifiers: Nerve modifiers.

    Returns:
        Table of modifier value -> probability. No modifiers means 0.
    """
    tables = [dice_plus_number_table(modifier) for modifier in modifiers]
    return _fold_tables(tables, max)


def _fold_tables(
    tables: list[ProbabilityTable],
    combine: Callable[[int, int], int],
) -> ProbabilityTable:
    """Combine independent tables pairwise with ``combine`` on their keys."""
    if not tables:
        return {0: Fraction(1)}

    accumulated = dict(tables[0])
    for other in tables[1:]:
        combined: defaultdict[int, Fraction] = defaultdict(Fraction)
        for value_a, prob_a in accumulated.items():
            for value_b, prob_b in other.items():
                combined[combine(value_a, value_b)] += prob_a * prob_b
        accumulated = dict(sorted(combined.items()))

    logger.debug(f"Folded {len(tables)} modifier tables into {len(accumulated)} outcomes")
    return accumulated
