"""Wounds table engine.

Rolling to wound is rolling to hit again: every hit is one die against the
defense threshold, with vicious in place of elite.
"""

import logging
from collections import defaultdict
from fractions import Fraction

from src.dice.hits import hits_table
from src.dice.types import HitsParams, ProbabilityTable, WoundsParams

logger = logging.getLogger(__name__)


def wounds_table(params: WoundsParams) -> ProbabilityTable:
    """Distribution of the number of wounds caused by a hits distribution.

    Args:
        params: Hits table, defense threshold, vicious flag and rerolls.

    Returns:
        Dense table from 0 wounds.
    """
    table: defaultdict[int, Fraction] = defaultdict(Fraction)

    for hits, hits_probability in params.hits_table.items():
        wounds_for_these_hits = hits_table(
            HitsParams(
                attack=hits,
                melee=params.defense,
                elite=params.vicious,
                rerolls=params.rerolls,
            )
        )
        for wounds, partial_probability in wounds_for_these_hits.items():
            table[wounds] += hits_probability * partial_probability

    if not table:
        return {}

    top = max(table)
    logger.debug(f"Wounds table on {params.defense}+ spans 0..{top}")
    return {wounds: table.get(wounds, Fraction(0)) for wounds in range(top + 1)}
