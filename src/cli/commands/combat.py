"""Combat odds commands."""

from typing import List, Optional

import typer

from src.cli.display import (
    display_difference,
    display_distribution,
    display_error,
    display_info,
    display_nerve_result,
)
from src.config import get_settings
from src.dice import (
    FEARLESS,
    BlastSpec,
    Defender,
    HitsParams,
    Nerve,
    ProbabilityError,
    ProbabilityTable,
    WoundsParams,
    check_distribution,
    difference_table,
    hits_table,
    nerve_test,
    parse_dice_plus_number,
    parse_reroll,
    wounds_table,
)


def _build_hits_params(
    attack: int,
    melee: int,
    elite: bool,
    reroll: list[str] | None,
    blast: str | None,
) -> HitsParams:
    """Validate CLI input and build the hits parameters."""
    max_dice = get_settings().max_dice
    if attack > max_dice:
        raise typer.BadParameter(f"at most {max_dice} attack dice are supported", param_hint="--attack")

    blast_spec = None
    if blast is not None:
        amount = parse_dice_plus_number(blast)
        blast_spec = BlastSpec(dice=amount.dice, plus=amount.plus)

    return HitsParams(
        attack=attack,
        melee=melee,
        elite=elite,
        rerolls=tuple(parse_reroll(value) for value in reroll or []),
        blast=blast_spec,
    )


def _wounds(
    hits: ProbabilityTable,
    defense: int,
    vicious: bool,
    defense_reroll: list[str] | None,
) -> ProbabilityTable:
    return wounds_table(
        WoundsParams(
            hits_table=hits,
            defense=defense,
            vicious=vicious,
            rerolls=tuple(parse_reroll(value) for value in defense_reroll or []),
        )
    )


def hits(
    attack: int = typer.Option(..., "--attack", "-a", min=0, help="Number of attack dice"),
    melee: int = typer.Option(4, "--melee", "-m", min=2, max=6, help="Roll needed to hit"),
    elite: bool = typer.Option(False, "--elite", help="Reroll natural ones to hit"),
    reroll: Optional[List[str]] = typer.Option(None, "--reroll", "-r", help="Dice that may be rerolled, e.g. D3 or ones:1"),
    blast: Optional[str] = typer.Option(None, "--blast", "-b", help="Blast per hit, e.g. D3 or D6+1"),
) -> None:
    """Show the chance of each number of hits."""
    settings = get_settings()
    try:
        params = _build_hits_params(attack, melee, elite, reroll, blast)
        table = check_distribution(hits_table(params))
    except ProbabilityError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_distribution(
        f"Hits: {attack} attacks on {melee}+",
        table,
        outcome_label="Hits",
        decimals=settings.percent_decimals,
        show_fractions=settings.show_fractions,
    )


def wounds(
    attack: int = typer.Option(..., "--attack", "-a", min=0, help="Number of attack dice"),
    melee: int = typer.Option(4, "--melee", "-m", min=2, max=6, help="Roll needed to hit"),
    defense: int = typer.Option(4, "--defense", "-d", min=2, max=6, help="Roll needed to wound"),
    elite: bool = typer.Option(False, "--elite", help="Reroll natural ones to hit"),
    vicious: bool = typer.Option(False, "--vicious", help="Reroll natural ones to wound"),
    reroll: Optional[List[str]] = typer.Option(None, "--reroll", "-r", help="Dice that may be rerolled to hit"),
    defense_reroll: Optional[List[str]] = typer.Option(None, "--defense-reroll", help="Dice that may be rerolled to wound"),
    blast: Optional[str] = typer.Option(None, "--blast", "-b", help="Blast per hit, e.g. D3 or D6+1"),
) -> None:
    """Show the chance of each number of wounds."""
    settings = get_settings()
    try:
        params = _build_hits_params(attack, melee, elite, reroll, blast)
        table = check_distribution(_wounds(hits_table(params), defense, vicious, defense_reroll))
    except ProbabilityError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_distribution(
        f"Wounds: {attack} attacks on {melee}+ against {defense}+",
        table,
        outcome_label="Wounds",
        decimals=settings.percent_decimals,
        show_fractions=settings.show_fractions,
    )


def nerve(
    attack: int = typer.Option(..., "--attack", "-a", min=0, help="Number of attack dice"),
    rout: int = typer.Option(..., "--rout", help="Nerve total needed to rout"),
    waver: Optional[int] = typer.Option(None, "--waver", help="Nerve total needed to waver"),
    fearless: bool = typer.Option(False, "--fearless", help="The unit never wavers"),
    inspired: bool = typer.Option(False, "--inspired", help="Reroll a rout once"),
    melee: int = typer.Option(4, "--melee", "-m", min=2, max=6, help="Roll needed to hit"),
    defense: int = typer.Option(4, "--defense", "-d", min=2, max=6, help="Roll needed to wound"),
    elite: bool = typer.Option(False, "--elite", help="Reroll natural ones to hit"),
    vicious: bool = typer.Option(False, "--vicious", help="Reroll natural ones to wound"),
    reroll: Optional[List[str]] = typer.Option(None, "--reroll", "-r", help="Dice that may be rerolled to hit"),
    defense_reroll: Optional[List[str]] = typer.Option(None, "--defense-reroll", help="Dice that may be rerolled to wound"),
    blast: Optional[str] = typer.Option(None, "--blast", "-b", help="Blast per hit, e.g. D3 or D6+1"),
    nerve_mod: Optional[List[str]] = typer.Option(None, "--nerve-mod", help="Extra nerve modifier, e.g. D6 or 1"),
) -> None:
    """Show the chance that the defender stays steady, wavers or routs."""
    settings = get_settings()
    if waver is None and not fearless:
        display_info("No --waver given; treating the unit as fearless")

    defender = Defender(
        nerve=Nerve(rout=rout, waver=FEARLESS if fearless or waver is None else waver),
        inspired=inspired,
    )
    try:
        params = _build_hits_params(attack, melee, elite, reroll, blast)
        wounds_caused = check_distribution(_wounds(hits_table(params), defense, vicious, defense_reroll))
        modifiers = [parse_dice_plus_number(value) for value in nerve_mod or []]
        result = nerve_test(wounds_caused, defender, modifiers)
    except ProbabilityError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_nerve_result(
        result,
        decimals=settings.percent_decimals,
        show_fractions=settings.show_fractions,
    )


def compare(
    attack: int = typer.Option(..., "--attack", "-a", min=0, help="Number of attack dice"),
    melee: int = typer.Option(4, "--melee", "-m", min=2, max=6, help="Roll needed to hit"),
    against_melee: int = typer.Option(..., "--against-melee", min=2, max=6, help="Roll needed to hit in the other profile"),
    elite: bool = typer.Option(False, "--elite", help="Reroll natural ones to hit"),
    reroll: Optional[List[str]] = typer.Option(None, "--reroll", "-r", help="Dice that may be rerolled to hit"),
    blast: Optional[str] = typer.Option(None, "--blast", "-b", help="Blast per hit, e.g. D3 or D6+1"),
) -> None:
    """Show how much more (or less) likely each hit count is on a different roll."""
    settings = get_settings()
    try:
        first = hits_table(_build_hits_params(attack, melee, elite, reroll, blast))
        second = hits_table(_build_hits_params(attack, against_melee, elite, reroll, blast))
    except ProbabilityError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_difference(
        f"Hits on {melee}+ compared to {against_melee}+",
        difference_table(first, second),
        outcome_label="Hits",
        decimals=settings.percent_decimals,
    )
