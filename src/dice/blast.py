"""Blast expansion: every hit turns into a die roll plus a flat amount."""

import logging
from fractions import Fraction

from src.dice.sums import dice_sum_table
from src.dice.types import BlastSpec, ProbabilityTable

logger = logging.getLogger(__name__)


def apply_blast(
    hits_table: ProbabilityTable,
    attack: int,
    blast: BlastSpec,
) -> ProbabilityTable:
    """Expand a hits table with a blast rule.

    Exactly ``h`` hits become the sum of ``h`` blast dice plus ``h * plus``.
    Zero hits stay zero. A blast with neither die nor bonus turns every hit
    into zero.

    Args:
        hits_table: Distribution of hits, keys 0..attack.
        attack: Largest number of hits that can trigger the blast.
        blast: The blast rule.

    Returns:
        Dense table over 0..attack * (dice + plus).

    Examples:
        >>> apply_blast({0: Fraction(1, 2), 1: Fraction(1, 2)}, 1, BlastSpec(plus=2))
        {0: Fraction(1, 2), 1: Fraction(0, 1), 2: Fraction(1, 2)}
    """
    max_hits = attack * blast.max_per_hit
    blasted = {hits: Fraction(0) for hits in range(max_hits + 1)}
    blasted[0] = hits_table.get(0, Fraction(0))

    for hits in range(1, attack + 1):
        hits_probability = hits_table.get(hits, Fraction(0))
        if not hits_probability:
            continue
        for dice_sum, dice_sum_probability in dice_sum_table(hits, blast.dice or 0).items():
            blasted[dice_sum + blast.plus * hits] += hits_probability * dice_sum_probability

    logger.debug(f"Blast {blast} over {attack} attacks spans 0..{max_hits}")
    return blasted
