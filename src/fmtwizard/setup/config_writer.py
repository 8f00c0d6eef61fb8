"""Configuration generation and writing for the fmtwizard setup wizard.

Maps wizard answers to ESLint and Prettier config documents and writes them
as 2-space indented JSON with atomic operations (temp file + rename).
"""

import json
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..settings import WizardSettings

logger = logging.getLogger(__name__)

QUOTE_STYLES = ("single", "double")
TRAILING_COMMA_STYLES = ("none", "es5", "all")

DEFAULT_QUOTE_STYLE = "single"
DEFAULT_TAB_WIDTH = 2
DEFAULT_TRAILING_COMMA = "none"

# Fixed parts of the ESLint document (independent of answers)
ESLINT_ENV: dict[str, bool] = {
    "browser": True,
    "es2021": True,
    "node": True,
}
ESLINT_EXTENDS: list[str] = ["eslint:recommended"]
ESLINT_PARSER_OPTIONS: dict[str, Any] = {
    "ecmaVersion": 12,
    "sourceType": "module",
}


@dataclass(frozen=True)
class LintPreferences:
    """Answers to the ESLint question batch.

    Attributes:
        quote_style: Preferred quote character ("single" or "double")
        use_semicolons: Require semicolons (False requires their absence)
        warn_unused_vars: Warn on unused variables (False disables the rule)
    """

    quote_style: str = DEFAULT_QUOTE_STYLE
    use_semicolons: bool = True
    warn_unused_vars: bool = True


@dataclass(frozen=True)
class FormatPreferences:
    """Answers to the Prettier question batch.

    Attributes:
        single_quote: Use single quotes
        tab_width: Spaces per indentation level (positive)
        trailing_comma: Trailing comma style ("none", "es5", "all")
    """

    single_quote: bool = True
    tab_width: int = DEFAULT_TAB_WIDTH
    trailing_comma: str = DEFAULT_TRAILING_COMMA


@dataclass(frozen=True)
class WriteResult:
    """Paths of the config files written by write_config_files.

    Attributes:
        eslint_path: Where the ESLint document was written
        prettier_path: Where the Prettier document was written
    """

    eslint_path: Path
    prettier_path: Path


def generate_eslint_config(prefs: LintPreferences) -> dict[str, Any]:
    """Generate the ESLint config document from lint answers.

    Args:
        prefs: Lint answers from the wizard

    Returns:
        Dict representing .eslintrc.json

    Examples:
        >>> config = generate_eslint_config(LintPreferences("double", False, False))
        >>> config["rules"]["quotes"]
        ['error', 'double']
        >>> config["rules"]["semi"]
        ['error', 'never']
        >>> config["rules"]["no-unused-vars"]
        'off'
    """
    return {
        "env": dict(ESLINT_ENV),
        "extends": list(ESLINT_EXTENDS),
        "parserOptions": dict(ESLINT_PARSER_OPTIONS),
        "rules": {
            "quotes": ["error", prefs.quote_style],
            "semi": ["error", "always" if prefs.use_semicolons else "never"],
            "no-unused-vars": "warn" if prefs.warn_unused_vars else "off",
        },
    }


def generate_prettier_config(prefs: FormatPreferences) -> dict[str, Any]:
    """Generate the Prettier config document from format answers.

    The three answers are copied verbatim; semicolons are always enabled.

    Examples:
        >>> generate_prettier_config(FormatPreferences())
        {'singleQuote': True, 'tabWidth': 2, 'trailingComma': 'none', 'semi': True}
    """
    return {
        "singleQuote": prefs.single_quote,
        "tabWidth": prefs.tab_width,
        "trailingComma": prefs.trailing_comma,
        "semi": True,
    }


def serialize_config(document: dict[str, Any]) -> str:
    """Serialize a config document to 2-space indented JSON text."""
    return json.dumps(document, indent=2)


def write_json_atomic(path: Path, document: dict[str, Any]) -> None:
    """Write a JSON document atomically using temp file + rename.

    Overwrites any existing file at path, preserving its permission bits.

    Args:
        path: Destination path
        document: Dict to serialize as JSON

    Raises:
        OSError: If write or rename fails
        TypeError: If document is not JSON serializable
    """
    text = serialize_config(document)
    temp_path = path.with_suffix(path.suffix + ".tmp")

    # A stale temp file would lend its mode to the new file
    temp_path.unlink(missing_ok=True)

    try:
        temp_path.write_text(text, encoding="utf-8")

        # Keep the mode of a file being replaced; new files follow the umask
        if path.exists():
            shutil.copymode(path, temp_path)

        # Atomic rename
        temp_path.replace(path)
    except Exception:
        # Clean up temp file on failure
        if temp_path.exists():
            temp_path.unlink()
        raise


def write_config_files(
    eslint_config: dict[str, Any],
    prettier_config: dict[str, Any],
    settings: WizardSettings,
) -> WriteResult:
    """Write both config documents into the project directory.

    ESLint is written first. Failures propagate; a file already written is
    left in place if the second write fails.

    Args:
        eslint_config: Document from generate_eslint_config
        prettier_config: Document from generate_prettier_config
        settings: Resolved wizard settings (destination paths)

    Returns:
        WriteResult with the written paths

    Raises:
        OSError: If either write fails
    """
    eslint_path = settings.eslint_config_path
    prettier_path = settings.prettier_config_path

    write_json_atomic(eslint_path, eslint_config)
    logger.info(f"Config written to {eslint_path}")

    write_json_atomic(prettier_path, prettier_config)
    logger.info(f"Config written to {prettier_path}")

    return WriteResult(eslint_path=eslint_path, prettier_path=prettier_path)
