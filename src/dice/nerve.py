"""Nerve test engine.

A unit that took wounds rolls 2d6, adds its wounds and compares the total
against its waver and rout thresholds:

- double 1 is always steady
- total >= rout routs the unit
- total >= waver wavers it, and double 6 always wavers unless it routed
- fearless units never waver
- inspired units reroll a rout once
"""

import logging
from collections.abc import Iterable

from src.dice.modifiers import combine_nerve_modifiers
from src.dice.sums import dice_sum_table
from src.dice.types import DicePlusNumber, Defender, NerveTestResult, ProbabilityTable

logger = logging.getLogger(__name__)

SNAKE_EYES = 2
BOXCARS = 12


def nerve_test(
    wounds_table: ProbabilityTable,
    defender: Defender,
    nerve_modifiers: Iterable[DicePlusNumber] = (),
) -> NerveTestResult:
    """Probability of each nerve test outcome after taking wounds.

    Args:
        wounds_table: Distribution of wounds caused.
        defender: The unit testing its nerve.
        nerve_modifiers: Extra amounts added to the wounds; only the largest
            one rolled applies.

    Returns:
        NerveTestResult whose outcomes sum to the wounds table total.
    """
    result = NerveTestResult.zero()
    modifier_table = combine_nerve_modifiers(nerve_modifiers)

    for wounds, wounds_probability in wounds_table.items():
        # No nerve test without wounds
        if wounds == 0:
            result += NerveTestResult(steady=wounds_probability)
            continue
        for modifier, modifier_probability in modifier_table.items():
            outcome = nerve_test_with_wounds(wounds + modifier, defender)
            result += outcome.scaled(wounds_probability * modifier_probability)

    logger.debug(
        f"Nerve test against {defender.nerve.waver}/{defender.nerve.rout}: "
        f"{float(result.steady):.3f}/{float(result.waver):.3f}/{float(result.rout):.3f}"
    )
    return result


def nerve_test_with_wounds(wounds: int, defender: Defender) -> NerveTestResult:
    """Outcome probabilities of a single nerve test with a fixed wound total.

    Inspired units combine the first roll with one reroll on a rout; this is
    the simplified form steady + rout * steady, waver + rout * waver, rout ** 2.
    """
    to_rout = defender.nerve.rout - wounds
    fearless = defender.nerve.is_fearless
    to_waver = None if fearless else defender.nerve.waver - wounds

    result = NerveTestResult.zero()
    for roll, roll_probability in dice_sum_table(2, 6).items():
        if not roll_probability:
            continue
        if roll == SNAKE_EYES:
            result += NerveTestResult(steady=roll_probability)
        elif roll >= to_rout:
            result += NerveTestResult(rout=roll_probability)
        elif not fearless and (roll >= to_waver or roll == BOXCARS):
            result += NerveTestResult(waver=roll_probability)
        else:
            result += NerveTestResult(steady=roll_probability)

    if defender.inspired:
        result = NerveTestResult(
            steady=result.steady + result.rout * result.steady,
            waver=result.waver + result.rout * result.waver,
            rout=result.rout * result.rout,
        )

    return result
