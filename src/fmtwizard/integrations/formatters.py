"""ESLint and Prettier invocation through a package runner.

ESLint and Prettier are external tools - this module:
1. Builds the runner command line for each tool
2. Runs it in the project directory with inherited stdout/stderr
3. Records the outcome as a RunResult instead of raising

Usage:
    from fmtwizard.integrations.formatters import run_formatters

    results = run_formatters(settings)
    failed = [r for r in results if not r.ok]
"""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import click

from ..settings import WizardSettings

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    """Outcome of a single formatter invocation."""

    OK = "ok"
    FAILED = "failed"  # Non-zero exit (lint errors, bad config, ...)
    NOT_FOUND = "not_found"  # Runner missing or not executable
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class FormatterCommand:
    """An external tool and the arguments passed to it through the runner."""

    name: str
    args: tuple[str, ...]
    banner: str

    def argv(self, runner: str) -> list[str]:
        """Return the full command line for the given package runner."""
        return [runner, *self.args]


@dataclass(frozen=True)
class RunResult:
    """Result of a best-effort formatter invocation.

    Attributes:
        tool: Tool name (e.g., "ESLint")
        status: Outcome category
        exit_status: Process exit code (None if the process never ran to completion)
        diagnostic: Short description of the failure (None on success)
    """

    tool: str
    status: RunStatus
    exit_status: Optional[int]
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.OK


ESLINT = FormatterCommand(name="ESLint", args=("eslint", ".", "--fix"), banner="🔧 Formatting with ESLint...")
PRETTIER = FormatterCommand(name="Prettier", args=("prettier", "--write", "."), banner="🎨 Formatting with Prettier...")

# Order matters: lint fixes first, then formatting
FORMATTER_COMMANDS: tuple[FormatterCommand, ...] = (ESLINT, PRETTIER)


def run_tool(command: FormatterCommand, settings: WizardSettings, runner_path: Optional[str] = None) -> RunResult:
    """Run one formatter command in the project directory.

    Output is not captured; the tool writes straight to the console.

    Args:
        command: Tool to run
        settings: Resolved wizard settings (runner, project_dir, timeout)
        runner_path: Resolved runner executable; falls back to settings.package_runner

    Returns:
        RunResult describing the outcome

    Note:
        This function never raises for tool failures - the wizard only
        attempts formatting, it does not require a clean result.
    """
    argv = command.argv(runner_path or settings.package_runner)
    logger.debug(f"Running {' '.join(argv)} in {settings.project_dir}")

    try:
        completed = subprocess.run(
            argv,
            cwd=settings.project_dir,
            check=False,
            timeout=settings.tool_timeout,
        )
    except subprocess.TimeoutExpired:
        result = RunResult(
            tool=command.name,
            status=RunStatus.TIMEOUT,
            exit_status=None,
            diagnostic=f"timed out after {settings.tool_timeout}s",
        )
    except OSError as e:
        result = RunResult(
            tool=command.name,
            status=RunStatus.NOT_FOUND,
            exit_status=None,
            diagnostic=f"could not run {argv[0]}: {e}",
        )
    else:
        if completed.returncode == 0:
            return RunResult(tool=command.name, status=RunStatus.OK, exit_status=0)
        result = RunResult(
            tool=command.name,
            status=RunStatus.FAILED,
            exit_status=completed.returncode,
            diagnostic=f"exited with status {completed.returncode}",
        )

    logger.warning(f"⚠️ {command.name} finished with warnings or errors ({result.diagnostic})")
    return result


def run_formatters(
    settings: WizardSettings,
    runner_path: Optional[str] = None,
    commands: tuple[FormatterCommand, ...] = FORMATTER_COMMANDS,
) -> list[RunResult]:
    """Run each formatter in order; a failure never stops the next one.

    Args:
        settings: Resolved wizard settings
        runner_path: Resolved runner executable (e.g., from detect_runner)
        commands: Tools to run (default: ESLint then Prettier)

    Returns:
        One RunResult per command, in order
    """
    results = []
    for command in commands:
        click.echo(f"\n{command.banner}")
        results.append(run_tool(command, settings, runner_path))
    return results
