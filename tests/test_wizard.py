"""Tests for interactive prompts and review formatting."""

import click
import pytest
from click.testing import CliRunner

from fmtwizard.settings import WizardSettings
from fmtwizard.setup.config_writer import FormatPreferences, LintPreferences
from fmtwizard.setup.wizard import (
    ask_format_preferences,
    ask_lint_preferences,
    ask_preferences,
    format_config_review,
    format_single_quote_menu,
    get_single_quote_from_choice,
)
from tests.conftest import ALL_DEFAULTS_INPUT


def _run_prompts(func, user_input):
    """Run a prompt function under CliRunner and return (answers, output)."""
    answers = []

    @click.command()
    def collect():
        answers.append(func())

    result = CliRunner().invoke(collect, input=user_input)
    assert result.exception is None, result.output
    return answers[0], result.output


class TestAskLintPreferences:
    """Test suite for the ESLint question batch."""

    def test_defaults(self):
        """Enter at every prompt gives single/true/true."""
        prefs, output = _run_prompts(ask_lint_preferences, "\n\n\n")

        assert prefs == LintPreferences(quote_style="single", use_semicolons=True, warn_unused_vars=True)
        assert "Which quotes do you prefer?" in output
        assert "Use semicolons?" in output
        assert "Warn on unused variables?" in output

    def test_explicit_answers(self):
        """Typed answers are honoured."""
        prefs, _ = _run_prompts(ask_lint_preferences, "double\nn\nn\n")

        assert prefs == LintPreferences(quote_style="double", use_semicolons=False, warn_unused_vars=False)

    def test_invalid_quote_choice_reasked(self):
        """Unknown choice is rejected and asked again."""
        prefs, output = _run_prompts(ask_lint_preferences, "backtick\ndouble\ny\ny\n")

        assert prefs.quote_style == "double"
        assert output.count("Which quotes do you prefer?") == 2


class TestAskFormatPreferences:
    """Test suite for the Prettier question batch."""

    def test_defaults(self):
        """Enter at every prompt gives the documented defaults."""
        prefs, output = _run_prompts(ask_format_preferences, "\n\n\n")

        assert prefs == FormatPreferences(single_quote=True, tab_width=2, trailing_comma="none")
        assert "[1] Yes (single quotes) [DEFAULT]" in output
        assert "[2] No (double quotes)" in output

    def test_explicit_answers(self):
        """Menu choice 2 maps to single_quote=False."""
        prefs, _ = _run_prompts(ask_format_preferences, "2\n4\nall\n")

        assert prefs == FormatPreferences(single_quote=False, tab_width=4, trailing_comma="all")

    @pytest.mark.parametrize("bad_value", ["0", "-3", "abc"])
    def test_tab_width_rejects_non_positive(self, bad_value):
        """Zero, negative and non-numeric widths are rejected with a message."""
        prefs, output = _run_prompts(ask_format_preferences, f"1\n{bad_value}\n8\nes5\n")

        assert "Must be a positive number" in output
        assert output.count("Prettier: Tab width?") == 2
        assert prefs.tab_width == 8
        assert prefs.trailing_comma == "es5"

    def test_tab_width_reasked_until_valid(self):
        """Several bad values in a row keep the prompt open."""
        prefs, output = _run_prompts(ask_format_preferences, "1\n0\n-1\n3\nnone\n")

        assert output.count("Must be a positive number") == 2
        assert prefs.tab_width == 3


class TestAskPreferences:
    """Test suite for ask_preferences function."""

    def test_lint_batch_before_format_batch(self):
        """ESLint questions are all asked before the Prettier ones."""
        (lint, fmt), output = _run_prompts(ask_preferences, ALL_DEFAULTS_INPUT)

        assert lint == LintPreferences()
        assert fmt == FormatPreferences()
        assert output.index("Warn on unused variables?") < output.index("Prettier: Use single quotes?")


class TestSingleQuoteMenu:
    """Test suite for the labelled quote menu helpers."""

    def test_menu_lists_both_options(self):
        menu = format_single_quote_menu()
        assert menu.splitlines() == ["[1] Yes (single quotes) [DEFAULT]", "[2] No (double quotes)"]

    def test_choice_mapping(self):
        assert get_single_quote_from_choice(1) is True
        assert get_single_quote_from_choice(2) is False

    @pytest.mark.parametrize("choice", [0, 3, -1])
    def test_invalid_choice_raises(self, choice):
        with pytest.raises(ValueError, match="Invalid choice"):
            get_single_quote_from_choice(choice)


class TestFormatConfigReview:
    """Test suite for format_config_review function."""

    def test_defaults(self, settings):
        """Review lists every answer and the destination files."""
        review = format_config_review(LintPreferences(), FormatPreferences(), settings)

        lines = review.split("\n")
        assert lines[0] == "Configuration Summary:"
        assert "✓ Quotes: single" in review
        assert "✓ Semicolons: Required" in review
        assert "✓ Unused variable warnings: Enabled" in review
        assert "✓ Prettier quotes: single" in review
        assert "✓ Tab width: 2" in review
        assert "✓ Trailing commas: none" in review
        assert ".eslintrc.json, .prettierrc.json" in review

    def test_disabled_options(self, project_dir):
        """Disabled options use the cross marker."""
        settings = WizardSettings(project_dir=project_dir, prettier_config_name="prettier.json")
        review = format_config_review(
            LintPreferences("double", False, False),
            FormatPreferences(False, 4, "all"),
            settings,
        )

        assert "✗ Semicolons: Disallowed" in review
        assert "✗ Unused variable warnings: Disabled" in review
        assert "✓ Prettier quotes: double" in review
        assert "prettier.json" in review
