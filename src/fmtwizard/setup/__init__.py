"""Configuration and setup utilities.

This module contains the first-run setup pipeline:
- presence: Detect existing config files
- wizard: Interactive prompts and review formatting
- config_writer: Config generation and atomic JSON writes
- env_detector: Package runner detection
"""

from fmtwizard.setup.config_writer import (
    FormatPreferences,
    LintPreferences,
    WriteResult,
    generate_eslint_config,
    generate_prettier_config,
    write_config_files,
)
from fmtwizard.setup.env_detector import ToolInfo, detect_runner
from fmtwizard.setup.presence import ConfigPresence, check_config_presence
from fmtwizard.setup.wizard import ask_preferences, format_config_review

__all__ = [
    # Config writer
    "LintPreferences",
    "FormatPreferences",
    "WriteResult",
    "generate_eslint_config",
    "generate_prettier_config",
    "write_config_files",
    # Presence
    "ConfigPresence",
    "check_config_presence",
    # Wizard
    "ask_preferences",
    "format_config_review",
    # Environment detection
    "ToolInfo",
    "detect_runner",
]
