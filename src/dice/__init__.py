"""Exact probability tables for melee combat.

Builds hits, wounds and nerve test distributions with exact fractions.

Usage:
    >>> from src.dice import HitsParams, WoundsParams, hits_table, wounds_table
    >>> hits = hits_table(HitsParams(attack=10, melee=4))
    >>> wounds = wounds_table(WoundsParams(hits_table=hits, defense=5))
"""

# Types
from src.dice.types import (
    FEARLESS,
    BlastSpec,
    Defender,
    DicePlusNumber,
    HitsParams,
    Nerve,
    NerveTestResult,
    ProbabilityTable,
    RerollModifier,
    WoundsParams,
)

# Errors
from src.dice.exceptions import (
    ArithmeticInvariantError,
    InvalidParameterError,
    ProbabilityError,
)

# Parser
from src.dice.parser import DiceParseError, parse_dice_plus_number, parse_reroll

# Primitives
from src.dice.sums import dice_sum_table
from src.dice.binomial import (
    dice_probability,
    probability_to_get_successes,
    success_table,
)
from src.dice.modifiers import (
    combine_nerve_modifiers,
    combine_rerolls,
    dice_plus_number_table,
)

# Engines
from src.dice.blast import apply_blast
from src.dice.hits import hits_table
from src.dice.wounds import wounds_table
from src.dice.nerve import nerve_test, nerve_test_with_wounds

# Tables
from src.dice.tables import (
    check_distribution,
    combine_tables,
    combine_two_tables,
    difference_table,
    table_total,
)
from src.dice.summary import at_least_table, expected_value, to_percentages

__all__ = [
    # Types
    "FEARLESS",
    "BlastSpec",
    "Defender",
    "DicePlusNumber",
    "HitsParams",
    "Nerve",
    "NerveTestResult",
    "ProbabilityTable",
    "RerollModifier",
    "WoundsParams",
    # Errors
    "ArithmeticInvariantError",
    "InvalidParameterError",
    "ProbabilityError",
    "DiceParseError",
    # Parser
    "parse_dice_plus_number",
    "parse_reroll",
    # Primitives
    "dice_sum_table",
    "dice_probability",
    "probability_to_get_successes",
    "success_table",
    "combine_nerve_modifiers",
    "combine_rerolls",
    "dice_plus_number_table",
    # Engines
    "apply_blast",
    "hits_table",
    "wounds_table",
    "nerve_test",
    "nerve_test_with_wounds",
    # Tables
    "check_distribution",
    "combine_tables",
    "combine_two_tables",
    "difference_table",
    "table_total",
    "at_least_table",
    "expected_value",
    "to_percentages",
]
