"""Binomial success tables.

The foundation of every "how many of N dice succeed" question: each die is
an independent trial with the same success probability.
"""

import math
from fractions import Fraction

from src.dice.exceptions import ArithmeticInvariantError, InvalidParameterError
from src.dice.types import ProbabilityTable


def dice_probability(required: int) -> Fraction:
    """Chance that a D6 rolls ``required`` or more.

    Examples:
        >>> dice_probability(4)
        Fraction(1, 2)
    """
    if not 1 <= required <= 6:
        raise InvalidParameterError(f"A D6 cannot roll {required}+")
    return Fraction(7 - required, 6)


def binomial_coefficient(n: int, k: int) -> int:
    """Number of ways to choose ``k`` of ``n`` dice, as an exact integer."""
    coefficient = math.comb(n, k)
    if not isinstance(coefficient, int):
        raise ArithmeticInvariantError(
            f"C({n}, {k}) is not an integer: {coefficient!r}", value=coefficient
        )
    return coefficient


def probability_to_get_successes(
    dice_rolled: int,
    success_probability: Fraction,
    successes: int,
) -> Fraction:
    """Probability that exactly ``successes`` of ``dice_rolled`` dice succeed.

    Args:
        dice_rolled: Number of dice rolled.
        success_probability: Chance for a single die to succeed.
        successes: Exact number of successes wanted.

    Returns:
        C(n, k) * p^k * (1 - p)^(n - k), or 0 when k is out of range.

    Examples:
        >>> probability_to_get_successes(1, Fraction(4, 6), 0)
        Fraction(1, 3)
    """
    _check_trials(dice_rolled, success_probability)
    if not 0 <= successes <= dice_rolled:
        return Fraction(0)

    misses = dice_rolled - successes
    miss_probability = 1 - success_probability
    return (
        binomial_coefficient(dice_rolled, successes)
        * success_probability**successes
        * miss_probability**misses
    )


def success_table(dice_rolled: int, success_probability: Fraction) -> ProbabilityTable:
    """Distribution of the number of successes among ``dice_rolled`` dice.

    Examples:
        >>> success_table(2, Fraction(1, 2))
        {0: Fraction(1, 4), 1: Fraction(1, 2), 2: Fraction(1, 4)}
    """
    _check_trials(dice_rolled, success_probability)
    return {
        successes: probability_to_get_successes(dice_rolled, success_probability, successes)
        for successes in range(dice_rolled + 1)
    }


def _check_trials(dice_rolled: int, success_probability: Fraction) -> None:
    if dice_rolled < 0:
        raise InvalidParameterError(f"Cannot roll {dice_rolled} dice")
    if not 0 <= success_probability <= 1:
        raise InvalidParameterError(
            f"Success probability must be between 0 and 1, got {success_probability}"
        )
