"""Interactive prompts and display helpers for the fmtwizard setup flow.

Questions are asked in two batches (ESLint, then Prettier) on standard
input/output through click. Each batch returns a frozen preferences object.
"""

from __future__ import annotations

from typing import Any, Optional

import click

from ..settings import WizardSettings
from .config_writer import (
    DEFAULT_QUOTE_STYLE,
    DEFAULT_TAB_WIDTH,
    DEFAULT_TRAILING_COMMA,
    QUOTE_STYLES,
    TRAILING_COMMA_STYLES,
    FormatPreferences,
    LintPreferences,
)

# Labelled options for the Prettier quote question, in menu order
SINGLE_QUOTE_OPTIONS: list[tuple[str, bool]] = [
    ("Yes (single quotes)", True),
    ("No (double quotes)", False),
]
DEFAULT_SINGLE_QUOTE = True


class PositiveNumber(click.ParamType):
    """Click parameter type accepting integers greater than zero."""

    name = "number"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        else:
            try:
                number = int(str(value).strip())
            except ValueError:
                self.fail("Must be a positive number", param, ctx)
        if number <= 0:
            self.fail("Must be a positive number", param, ctx)
        return number


POSITIVE_NUMBER = PositiveNumber()


def format_single_quote_menu() -> str:
    """Format the Prettier quote style selection menu.

    Returns:
        Formatted menu string

    Examples:
        >>> menu = format_single_quote_menu()
        >>> "[1] Yes (single quotes) [DEFAULT]" in menu
        True
        >>> "[2] No (double quotes)" in menu
        True
    """
    lines = []
    for i, (label, value) in enumerate(SINGLE_QUOTE_OPTIONS, 1):
        default_marker = " [DEFAULT]" if value == DEFAULT_SINGLE_QUOTE else ""
        lines.append(f"[{i}] {label}{default_marker}")
    return "\n".join(lines)


def get_single_quote_from_choice(choice: int) -> bool:
    """Convert menu choice number to the singleQuote value.

    Raises:
        ValueError: If choice is out of range

    Examples:
        >>> get_single_quote_from_choice(1)
        True
        >>> get_single_quote_from_choice(2)
        False
        >>> get_single_quote_from_choice(3)
        Traceback (most recent call last):
            ...
        ValueError: Invalid choice: 3. Must be 1 or 2.
    """
    if 1 <= choice <= len(SINGLE_QUOTE_OPTIONS):
        return SINGLE_QUOTE_OPTIONS[choice - 1][1]
    raise ValueError(f"Invalid choice: {choice}. Must be 1 or 2.")


def _default_single_quote_choice() -> int:
    values = [value for _, value in SINGLE_QUOTE_OPTIONS]
    return values.index(DEFAULT_SINGLE_QUOTE) + 1


def ask_lint_preferences() -> LintPreferences:
    """Ask the ESLint question batch.

    Returns:
        LintPreferences built from the answers
    """
    quotes = click.prompt(
        "Which quotes do you prefer?",
        type=click.Choice(list(QUOTE_STYLES)),
        default=DEFAULT_QUOTE_STYLE,
    )
    semi = click.confirm("Use semicolons?", default=True)
    no_unused_vars = click.confirm("Warn on unused variables?", default=True)

    return LintPreferences(quote_style=quotes, use_semicolons=semi, warn_unused_vars=no_unused_vars)


def ask_format_preferences() -> FormatPreferences:
    """Ask the Prettier question batch.

    The tab width question re-asks until a positive integer is entered.

    Returns:
        FormatPreferences built from the answers
    """
    click.echo(format_single_quote_menu())
    choice = click.prompt(
        "Prettier: Use single quotes?",
        type=click.IntRange(1, len(SINGLE_QUOTE_OPTIONS)),
        default=_default_single_quote_choice(),
    )
    tab_width = click.prompt("Prettier: Tab width?", type=POSITIVE_NUMBER, default=DEFAULT_TAB_WIDTH)
    trailing_comma = click.prompt(
        "Prettier: Trailing commas?",
        type=click.Choice(list(TRAILING_COMMA_STYLES)),
        default=DEFAULT_TRAILING_COMMA,
    )

    return FormatPreferences(
        single_quote=get_single_quote_from_choice(choice),
        tab_width=tab_width,
        trailing_comma=trailing_comma,
    )


def ask_preferences() -> tuple[LintPreferences, FormatPreferences]:
    """Ask both question batches, ESLint first."""
    lint = ask_lint_preferences()
    fmt = ask_format_preferences()
    return lint, fmt


def format_config_review(lint: LintPreferences, fmt: FormatPreferences, settings: WizardSettings) -> str:
    """Format the chosen preferences for the review step.

    Args:
        lint: ESLint answers
        fmt: Prettier answers
        settings: Resolved settings (destination file names)

    Returns:
        Formatted summary of configuration

    Examples:
        >>> from pathlib import Path
        >>> review = format_config_review(LintPreferences(), FormatPreferences(), WizardSettings(Path(".")))
        >>> "Configuration Summary:" in review
        True
        >>> "✓ Semicolons: Required" in review
        True
        >>> "Tab width: 2" in review
        True
    """
    lines = ["Configuration Summary:"]

    # ESLint
    lines.append(f"✓ Quotes: {lint.quote_style}")
    symbol = "✓" if lint.use_semicolons else "✗"
    lines.append(f"{symbol} Semicolons: {'Required' if lint.use_semicolons else 'Disallowed'}")
    symbol = "✓" if lint.warn_unused_vars else "✗"
    lines.append(f"{symbol} Unused variable warnings: {'Enabled' if lint.warn_unused_vars else 'Disabled'}")

    # Prettier
    lines.append(f"✓ Prettier quotes: {'single' if fmt.single_quote else 'double'}")
    lines.append(f"✓ Tab width: {fmt.tab_width}")
    lines.append(f"✓ Trailing commas: {fmt.trailing_comma}")

    lines.append("")
    lines.append(f"Configs written to: {settings.eslint_config_name}, {settings.prettier_config_name}")

    return "\n".join(lines)
