"""Rich display helpers for CLI output."""

from fractions import Fraction

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from src.dice import NerveTestResult, ProbabilityTable, at_least_table, expected_value


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def format_percent(probability: Fraction, decimals: int = 2, signed: bool = False) -> str:
    """Format an exact probability as a percentage string."""
    sign = "+" if signed else ""
    return f"{float(probability * 100):{sign}.{decimals}f}%"


def display_distribution(
    title: str,
    table: ProbabilityTable,
    outcome_label: str = "Outcome",
    decimals: int = 2,
    show_fractions: bool = False,
) -> None:
    """Display a probability table with cumulative chances and bars.

    Args:
        title: Table title.
        table: Outcome -> probability.
        outcome_label: Header for the outcome column (e.g., "Hits").
        decimals: Decimals for percentages.
        show_fractions: Whether to add a column with the exact fraction.
    """
    at_least = at_least_table(table)

    rich_table = Table(title=title, box=box.ROUNDED)
    rich_table.add_column(outcome_label, justify="right", style="cyan")
    rich_table.add_column("Exactly", justify="right")
    rich_table.add_column("At least", justify="right", style="yellow")
    rich_table.add_column("", width=22)
    if show_fractions:
        rich_table.add_column("Fraction", justify="right", style="dim")

    for outcome, probability in table.items():
        row = [
            str(outcome),
            format_percent(probability, decimals),
            format_percent(at_least[outcome], decimals),
            _create_probability_bar(probability),
        ]
        if show_fractions:
            row.append(str(probability))
        rich_table.add_row(*row)

    console.print(rich_table)
    console.print(f"[bold]Average:[/bold] {float(expected_value(table)):.{decimals}f}")


def display_difference(
    title: str,
    table: ProbabilityTable,
    outcome_label: str = "Outcome",
    decimals: int = 2,
) -> None:
    """Display a difference table; gains in green, losses in red.

    Args:
        title: Table title.
        table: Outcome -> probability difference.
        outcome_label: Header for the outcome column.
        decimals: Decimals for percentages.
    """
    rich_table = Table(title=title, box=box.ROUNDED)
    rich_table.add_column(outcome_label, justify="right", style="cyan")
    rich_table.add_column("Difference", justify="right")

    for outcome, difference in table.items():
        style = "green" if difference > 0 else "red" if difference < 0 else "dim"
        rich_table.add_row(
            str(outcome),
            f"[{style}]{format_percent(difference, decimals, signed=True)}[/{style}]",
        )

    console.print(rich_table)


def display_nerve_result(
    result: NerveTestResult,
    decimals: int = 2,
    show_fractions: bool = False,
) -> None:
    """Display steady/waver/rout probabilities.

    Args:
        result: Nerve test outcome probabilities.
        decimals: Decimals for percentages.
        show_fractions: Whether to add a column with the exact fraction.
    """
    styles = {"steady": "green", "waver": "yellow", "rout": "red"}

    rich_table = Table(title="Nerve Test", box=box.ROUNDED)
    rich_table.add_column("Outcome", style="white")
    rich_table.add_column("Chance", justify="right")
    rich_table.add_column("", width=22)
    if show_fractions:
        rich_table.add_column("Fraction", justify="right", style="dim")

    for name, probability in result.as_dict().items():
        row = [
            f"[{styles[name]}]{name.title()}[/{styles[name]}]",
            format_percent(probability, decimals),
            _create_probability_bar(probability),
        ]
        if show_fractions:
            row.append(str(probability))
        rich_table.add_row(*row)

    console.print(rich_table)


def _create_probability_bar(probability: Fraction, width: int = 20) -> Text:
    """Create a Rich Text bar for a probability with color coding.

    Args:
        probability: Value between 0 and 1.
        width: Bar width in characters.

    Returns:
        Rich Text object with styled bar.
    """
    filled = min(width, max(0, int(probability * width)))
    empty = width - filled

    if probability > Fraction(1, 2):
        color = "green"
    elif probability > Fraction(1, 5):
        color = "yellow"
    else:
        color = "red"

    bar_text = Text()
    bar_text.append("[", style="dim")
    bar_text.append("=" * filled, style=color)
    bar_text.append(" " * empty, style="dim")
    bar_text.append("]", style="dim")

    return bar_text
