"""
fmtwizard - interactive ESLint/Prettier setup wizard.

Package structure:
- fmtwizard.setup: Presence check, prompts, config generation and writing
- fmtwizard.integrations: External formatter invocation
- fmtwizard.orchestrator: Top-level wizard flow

Public API:
- run_wizard(): Run the whole wizard for a project directory
- load_settings(): Resolve WizardSettings from YAML layers and overrides
- generate_eslint_config() / generate_prettier_config(): Pure config builders
"""

__version__ = "0.1.0"

from fmtwizard.orchestrator import WizardOutcome, run_wizard  # noqa: E402
from fmtwizard.settings import WizardSettings, load_settings  # noqa: E402
from fmtwizard.setup.config_writer import (  # noqa: E402
    FormatPreferences,
    LintPreferences,
    generate_eslint_config,
    generate_prettier_config,
)

__all__ = [
    "run_wizard",
    "WizardOutcome",
    "load_settings",
    "WizardSettings",
    "LintPreferences",
    "FormatPreferences",
    "generate_eslint_config",
    "generate_prettier_config",
]
