"""Probability engine type definitions.

Immutable dataclasses for attack parameters, modifiers, defenders and nerve
test outcomes. Distribution tables are plain ``dict[int, Fraction]``.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Literal

from src.dice.exceptions import InvalidParameterError


# Outcome count -> exact probability
ProbabilityTable = dict[int, Fraction]

Melee = Literal[2, 3, 4, 5, 6]
DieSize = Literal[3, 6]

FEARLESS = "fearless"

VALID_DIE_SIZES = (3, 6)
VALID_THRESHOLDS = range(2, 7)


def _check_threshold(name: str, value: int) -> None:
    if value not in VALID_THRESHOLDS:
        raise InvalidParameterError(f"{name} must be between 2 and 6, got {value}")


def _check_die(name: str, value: int | None) -> None:
    if value is not None and value not in VALID_DIE_SIZES:
        raise InvalidParameterError(f"{name} must be a D3 or a D6, got D{value}")


@dataclass(frozen=True)
class DicePlusNumber:
    """An optional die plus a flat bonus, e.g. D3+1.

    Attributes:
        dice: Size of the die to roll (3 or 6), or None for a flat value.
        plus: Flat amount added to the die result.
    """

    dice: DieSize | None = None
    plus: int = 0

    def __post_init__(self) -> None:
        _check_die("dice", self.dice)
        if self.plus < 0:
            raise InvalidParameterError(f"plus must be non-negative, got {self.plus}")

    def __str__(self) -> str:
        if self.dice is None:
            return str(self.plus)
        if self.plus:
            return f"D{self.dice}+{self.plus}"
        return f"D{self.dice}"


@dataclass(frozen=True)
class RerollModifier:
    """A reroll rule: how many dice may be rerolled.

    Attributes:
        amount: Number of dice that may be rerolled.
        only_ones: Whether the rule only applies to natural ones.
    """

    amount: DicePlusNumber
    only_ones: bool = False


@dataclass(frozen=True)
class BlastSpec:
    """Blast rule: every hit becomes a die roll plus a flat amount.

    An empty BlastSpec() is a valid blast that turns every hit into zero.
    Omit the blast entirely (None) to skip blast expansion.

    Attributes:
        dice: Blast die size (3 or 6), or None.
        plus: Flat amount added per hit.
    """

    dice: DieSize | None = None
    plus: int = 0

    def __post_init__(self) -> None:
        _check_die("blast dice", self.dice)
        if self.plus < 0:
            raise InvalidParameterError(f"blast plus must be non-negative, got {self.plus}")

    @property
    def max_per_hit(self) -> int:
        """Largest amount a single hit can become."""
        return (self.dice or 0) + self.plus


@dataclass(frozen=True)
class HitsParams:
    """Parameters for rolling to hit.

    Attributes:
        attack: Number of attack dice.
        melee: Success threshold on a D6 (2-6).
        elite: Reroll natural ones.
        rerolls: Extra reroll rules.
        blast: Blast rule, or None when the attack has no blast.
    """

    attack: int
    melee: Melee
    elite: bool = False
    rerolls: tuple[RerollModifier, ...] = field(default_factory=tuple)
    blast: BlastSpec | None = None

    def __post_init__(self) -> None:
        if self.attack < 0:
            raise InvalidParameterError(f"attack must be non-negative, got {self.attack}")
        _check_threshold("melee", self.melee)
        # Accept lists from callers but keep the dataclass hashable
        object.__setattr__(self, "rerolls", tuple(self.rerolls))


@dataclass(frozen=True)
class WoundsParams:
    """Parameters for rolling to wound.

    Attributes:
        hits_table: Distribution of the number of hits.
        defense: Defense threshold on a D6 (2-6).
        vicious: Reroll natural ones on the wound roll.
        rerolls: Extra reroll rules for the wound roll.
    """

    hits_table: ProbabilityTable
    defense: Melee
    vicious: bool = False
    rerolls: tuple[RerollModifier, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_threshold("defense", self.defense)
        object.__setattr__(self, "rerolls", tuple(self.rerolls))


@dataclass(frozen=True)
class Nerve:
    """Nerve thresholds of a unit.

    Attributes:
        rout: Total needed to rout.
        waver: Total needed to waver, or FEARLESS (also 0 or None) when the
            unit never wavers.
    """

    rout: int
    waver: int | Literal["fearless"] | None = FEARLESS

    @property
    def is_fearless(self) -> bool:
        """Check if this unit can never waver."""
        return self.waver == FEARLESS or not self.waver


@dataclass(frozen=True)
class Defender:
    """The unit taking the nerve test.

    Attributes:
        nerve: Waver and rout thresholds.
        inspired: Reroll a routing nerve test once.
    """

    nerve: Nerve
    inspired: bool = False


@dataclass(frozen=True)
class NerveTestResult:
    """Probabilities of each nerve test outcome.

    Attributes:
        steady: Probability the unit is unaffected.
        waver: Probability the unit wavers.
        rout: Probability the unit routs.
    """

    steady: Fraction = Fraction(0)
    waver: Fraction = Fraction(0)
    rout: Fraction = Fraction(0)

    @classmethod
    def zero(cls) -> "NerveTestResult":
        """An empty accumulator."""
        return cls(Fraction(0), Fraction(0), Fraction(0))

    @property
    def total(self) -> Fraction:
        """Sum of all three outcomes."""
        return self.steady + self.waver + self.rout

    def scaled(self, factor: Fraction) -> "NerveTestResult":
        """Multiply every outcome by a probability."""
        return NerveTestResult(
            steady=self.steady * factor,
            waver=self.waver * factor,
            rout=self.rout * factor,
        )

    def __add__(self, other: "NerveTestResult") -> "NerveTestResult":
        return NerveTestResult(
            steady=self.steady + other.steady,
            waver=self.waver + other.waver,
            rout=self.rout + other.rout,
        )

    def as_dict(self) -> dict[str, Fraction]:
        """Outcome name to probability, in steady/waver/rout order."""
        return {"steady": self.steady, "waver": self.waver, "rout": self.rout}
