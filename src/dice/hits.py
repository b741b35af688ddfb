"""Hits table engine.

Rerolls are modelled as extra dice rolled on top of the attack pool: with
``r`` rerolls the pool is ``attack + r`` dice and every success beyond
``attack`` is folded back onto ``attack``. Each extra die has the same
independent chance to succeed, so this is the same as rerolling ``r`` of the
failed dice.
"""

import logging
from collections import defaultdict
from fractions import Fraction

from src.dice.binomial import dice_probability, success_table
from src.dice.blast import apply_blast
from src.dice.modifiers import combine_rerolls
from src.dice.types import HitsParams, ProbabilityTable

logger = logging.getLogger(__name__)

# Rerolling natural ones is the same as a 7/6 chance on every die
ELITE_FACTOR = Fraction(7, 6)


def single_hit_probability(melee: int, elite: bool = False) -> Fraction:
    """Chance that one attack die hits."""
    probability = dice_probability(melee)
    if elite:
        probability *= ELITE_FACTOR
    return probability


def hits_table(params: HitsParams) -> ProbabilityTable:
    """Distribution of the number of hits for an attack.

    Args:
        params: Attack dice, threshold, elite flag, rerolls and blast.

    Returns:
        Dense table from 0 hits. Without blast the keys run 0..attack; with
        blast they run 0..attack * (blast dice + blast plus).

    Examples:
        >>> hits_table(HitsParams(attack=1, melee=3, elite=True))
        {0: Fraction(2, 9), 1: Fraction(7, 9)}
    """
    probability = single_hit_probability(params.melee, params.elite)
    reroll_table = combine_rerolls(params.rerolls)

    final_table: defaultdict[int, Fraction] = defaultdict(Fraction)
    for will_reroll, reroll_probability in reroll_table.items():
        # Never reroll more dice than were rolled
        top_reroll = min(params.attack, will_reroll)

        table = _fold_rerolled_dice(
            success_table(params.attack + top_reroll, probability),
            params.attack,
        )
        if params.blast is not None:
            table = apply_blast(table, params.attack, params.blast)

        for hits, hits_probability in table.items():
            final_table[hits] += reroll_probability * hits_probability

    logger.debug(
        f"Hits table for {params.attack} attacks on {params.melee}+ "
        f"across {len(reroll_table)} reroll branches"
    )
    return _dense(final_table)


def _fold_rerolled_dice(table: ProbabilityTable, attack: int) -> ProbabilityTable:
    """Fold successes from rerolled dice back onto the attack pool size."""
    folded = {hits: Fraction(0) for hits in range(attack + 1)}
    for hits, probability in table.items():
        folded[min(hits, attack)] += probability
    return folded


def _dense(table: dict[int, Fraction]) -> ProbabilityTable:
    top = max(table, default=0)
    return {key: table.get(key, Fraction(0)) for key in range(top + 1)}
