"""Distribution of the sum of several identical dice."""

import logging
from fractions import Fraction

from src.dice.exceptions import InvalidParameterError
from src.dice.types import ProbabilityTable

logger = logging.getLogger(__name__)


def dice_sum_table(dice_count: int, sides: int) -> ProbabilityTable:
    """Exact distribution of the sum of ``dice_count`` dice with faces 1..sides.

    The table is dense from 0 to ``dice_count * sides``; sums below the
    minimum have probability 0. Rolling no dice, or dice with no sides,
    always sums to 0.

    Args:
        dice_count: Number of dice rolled.
        sides: Number of faces on each die.

    Returns:
        Table of sum -> probability.

    Raises:
        InvalidParameterError: If either argument is negative.

    Examples:
        >>> dice_sum_table(1, 3)
        {0: Fraction(0, 1), 1: Fraction(1, 3), 2: Fraction(1, 3), 3: Fraction(1, 3)}
        >>> dice_sum_table(0, 6)
        {0: Fraction(1, 1)}
    """
    if dice_count < 0 or sides < 0:
        raise InvalidParameterError(
            f"Dice count and sides must be non-negative, got {dice_count}d{sides}"
        )
    if dice_count == 0 or sides == 0:
        return {0: Fraction(1)}

    # Count combinations as integers and divide once at the end
    numerators = [1]
    for die in range(1, dice_count + 1):
        new_numerators = [0] * (sides * die + 1)
        for total, count in enumerate(numerators):
            if not count:
                continue
            for side in range(1, sides + 1):
                new_numerators[total + side] += count
        numerators = new_numerators

    denominator = sides**dice_count
    logger.debug(f"Built {dice_count}d{sides} sum table over {len(numerators)} totals")
    return {total: Fraction(count, denominator) for total, count in enumerate(numerators)}
