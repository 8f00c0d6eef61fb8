"""Top-level wizard flow: check -> (collect -> derive -> persist) -> format.

States:
    START        -> presence check
    CONFIGURED   -> both configs exist, prompting is skipped
    UNCONFIGURED -> either config missing, prompt/generate/write both
    FORMATTING   -> formatters always run
    DONE         -> outcome returned to the caller
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import click

from .integrations.formatters import RunResult, run_formatters
from .settings import WizardSettings
from .setup.config_writer import (
    FormatPreferences,
    LintPreferences,
    WriteResult,
    generate_eslint_config,
    generate_prettier_config,
    write_config_files,
)
from .setup.env_detector import detect_runner
from .setup.presence import check_config_presence
from .setup.wizard import ask_preferences, format_config_review

logger = logging.getLogger(__name__)

PromptFn = Callable[[], tuple[LintPreferences, FormatPreferences]]
FormatFn = Callable[[WizardSettings, Optional[str]], list[RunResult]]


class WizardState(Enum):
    START = "start"
    CONFIGURED = "configured"
    UNCONFIGURED = "unconfigured"
    FORMATTING = "formatting"
    DONE = "done"


@dataclass(frozen=True)
class WizardOutcome:
    """What a wizard run did.

    Attributes:
        configured_before: Both configs existed before the run (no prompting)
        written: Paths written during setup (None when setup was skipped)
        results: Formatter results, in invocation order (empty if formatting was skipped)
    """

    configured_before: bool
    written: Optional[WriteResult]
    results: list[RunResult] = field(default_factory=list)


def _enter(state: WizardState) -> WizardState:
    logger.debug(f"Wizard state: {state.name}")
    return state


def run_setup(settings: WizardSettings, prompt: PromptFn = ask_preferences) -> WriteResult:
    """Collect answers, derive both documents and persist them.

    Raises:
        OSError: If a config file cannot be written
    """
    lint, fmt = prompt()

    eslint_config = generate_eslint_config(lint)
    prettier_config = generate_prettier_config(fmt)
    written = write_config_files(eslint_config, prettier_config, settings)

    click.echo("")
    click.echo(format_config_review(lint, fmt, settings))
    click.echo(f"✅ Created {settings.eslint_config_name} and {settings.prettier_config_name}")
    return written


def run_wizard(
    settings: WizardSettings,
    prompt: PromptFn = ask_preferences,
    formatter: FormatFn = run_formatters,
    skip_format: bool = False,
) -> WizardOutcome:
    """Run the full wizard for one project directory.

    Args:
        settings: Resolved wizard settings
        prompt: Returns (LintPreferences, FormatPreferences); only called when a config is missing
        formatter: Runs the external tools with the resolved runner path; always called unless skip_format is set
        skip_format: Stop after the config stage

    Returns:
        WizardOutcome describing the run

    Raises:
        OSError: If the presence check or a config write fails
    """
    _enter(WizardState.START)
    presence = check_config_presence(settings)

    written: Optional[WriteResult] = None
    if presence.all_present:
        _enter(WizardState.CONFIGURED)
        click.echo("📄 Config files found. Skipping setup.")
    else:
        _enter(WizardState.UNCONFIGURED)
        logger.info(f"Missing config files: {', '.join(str(p) for p in presence.missing)}")
        click.echo("🔧 No config found. Starting first-time setup...\n")
        written = run_setup(settings, prompt)

    results: list[RunResult] = []
    if skip_format:
        logger.info("Formatting skipped")
    else:
        _enter(WizardState.FORMATTING)
        runner = detect_runner(settings)
        if not runner.found:
            logger.warning(f"{settings.package_runner} not found in PATH; formatting will likely fail")
        results = formatter(settings, runner.path)
        click.echo("\n✅ Formatting complete!")

    _enter(WizardState.DONE)
    return WizardOutcome(configured_before=presence.all_present, written=written, results=results)
