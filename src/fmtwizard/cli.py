"""Command line entry point for fmtwizard.

Provides the Click-based `fmtwizard` command: set up ESLint/Prettier
configs on first run, then run both tools against the project.
"""

import logging
from typing import Optional

import click

from . import __version__
from .exceptions import ConfigurationError
from .logging_setup import setup_logging
from .orchestrator import run_wizard
from .settings import load_settings

DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="fmtwizard")
@click.argument("project_dir", type=click.Path(exists=True, file_okay=False), default=".")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings YAML file (replaces the project .fmtwizard.yaml).",
)
@click.option("--runner", default=None, help="Package runner used to launch eslint/prettier (default: npx).")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Per-tool timeout in seconds.")
@click.option("--skip-format", is_flag=True, help="Only create missing configs; do not run the formatters.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write log records to this file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    project_dir: str,
    settings_path: Optional[str],
    runner: Optional[str],
    timeout: Optional[float],
    skip_format: bool,
    log_file: Optional[str],
    verbose: bool,
) -> None:
    """Interactive ESLint/Prettier setup wizard.

    Prompts for preferences when .eslintrc.json or .prettierrc.json is
    missing, writes both files, then runs `eslint . --fix` and
    `prettier --write .` in PROJECT_DIR.
    """
    # Handlers go up first so warnings raised while reading settings are formatted
    setup_logging(level="DEBUG" if verbose else DEFAULT_LOG_LEVEL, log_file=log_file)

    try:
        settings = load_settings(project_dir, config_path=settings_path, package_runner=runner, tool_timeout=timeout)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if not verbose and settings.log_level != DEFAULT_LOG_LEVEL:
        setup_logging(level=settings.log_level, log_file=log_file)
    logger.debug(f"fmtwizard {__version__} starting in {settings.project_dir}")

    outcome = run_wizard(settings, skip_format=skip_format)

    failed = [r for r in outcome.results if not r.ok]
    if failed:
        logger.info(f"{len(failed)} formatter(s) reported problems: {', '.join(r.tool for r in failed)}")
