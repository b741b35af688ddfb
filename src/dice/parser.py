"""Modifier notation parser.

Parses the short notation used for rerolls and nerve modifiers: a flat
number (2), a die (D3, d6, 1D6) or a die plus a number (D3+1).
"""

import re

from src.dice.exceptions import InvalidParameterError
from src.dice.types import DicePlusNumber, RerollModifier


class DiceParseError(InvalidParameterError):
    """Error parsing modifier notation."""

    pass


# Pattern: a flat number, or an optional single die count, 'd', 3 or 6, optional +N
# Examples: 2, D3, d6, 1D6, D3+1, D6 + 2
DICE_PLUS_NUMBER_PATTERN = re.compile(
    r"^\s*(?:(?P<flat>\d+)|(?P<count>1)?d(?P<die>\d+)\s*(?:\+\s*(?P<plus>\d+))?)\s*$",
    re.IGNORECASE,
)

ONLY_ONES_PREFIX = "ones:"


def parse_dice_plus_number(notation: str) -> DicePlusNumber:
    """Parse modifier notation into a DicePlusNumber.

    Args:
        notation: Notation string (e.g., "D3+1", "D6", "2").

    Returns:
        DicePlusNumber with parsed values.

    Raises:
        DiceParseError: If notation is invalid or uses a die other than D3/D6.

    Examples:
        >>> parse_dice_plus_number("D3+1")
        DicePlusNumber(dice=3, plus=1)
        >>> parse_dice_plus_number("2")
        DicePlusNumber(dice=None, plus=2)
    """
    if not notation or not notation.strip():
        raise DiceParseError("Modifier notation cannot be empty")

    match = DICE_PLUS_NUMBER_PATTERN.match(notation)
    if not match:
        raise DiceParseError(f"Invalid modifier notation: '{notation}'")

    if match.group("flat") is not None:
        return DicePlusNumber(plus=int(match.group("flat")))

    die = int(match.group("die"))
    if die not in (3, 6):
        raise DiceParseError(f"Only D3 and D6 are supported, got D{die}")

    plus = int(match.group("plus")) if match.group("plus") else 0
    return DicePlusNumber(dice=die, plus=plus)


def parse_reroll(notation: str) -> RerollModifier:
    """Parse a reroll rule; a "ones:" prefix limits it to natural ones.

    Examples:
        >>> parse_reroll("ones:D3")
        RerollModifier(amount=DicePlusNumber(dice=3, plus=0), only_ones=True)
    """
    stripped = notation.strip()
    only_ones = stripped.lower().startswith(ONLY_ONES_PREFIX)
    if only_ones:
        stripped = stripped[len(ONLY_ONES_PREFIX):]
    return RerollModifier(amount=parse_dice_plus_number(stripped), only_ones=only_ones)
