"""Wizard settings with layered YAML overrides.

Settings layers (later overrides earlier):
1. Built-in defaults (WizardSettings field defaults)
2. User settings: config.yaml in the platform user config directory
3. Project settings: .fmtwizard.yaml in the project directory
   (replaced by an explicit settings file when one is given)
4. Keyword overrides (CLI options)

All paths are resolved against an explicit project directory passed in by the
caller, never against the process working directory at import time.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from platformdirs import user_config_dir

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

APP_NAME = "fmtwizard"
PROJECT_SETTINGS_NAME = ".fmtwizard.yaml"
USER_SETTINGS_NAME = "config.yaml"

# YAML key -> WizardSettings field
_SETTINGS_KEYS = {
    "eslint_config": "eslint_config_name",
    "prettier_config": "prettier_config_name",
    "package_runner": "package_runner",
    "tool_timeout": "tool_timeout",
    "log_level": "log_level",
}

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class WizardSettings:
    """Resolved settings for a single wizard run.

    Attributes:
        project_dir: Directory the configs are written to and the formatters run in
        eslint_config_name: ESLint config filename, relative to project_dir
        prettier_config_name: Prettier config filename, relative to project_dir
        package_runner: Executable used to launch eslint/prettier (e.g., "npx")
        tool_timeout: Seconds before a formatter is abandoned (None waits forever)
        log_level: Logging level name for the fmtwizard logger
    """

    project_dir: Path
    eslint_config_name: str = ".eslintrc.json"
    prettier_config_name: str = ".prettierrc.json"
    package_runner: str = "npx"
    tool_timeout: Optional[float] = None
    log_level: str = "WARNING"

    @property
    def eslint_config_path(self) -> Path:
        return self.project_dir / self.eslint_config_name

    @property
    def prettier_config_path(self) -> Path:
        return self.project_dir / self.prettier_config_name


def user_settings_path() -> Path:
    """Return the per-user settings file location (may not exist)."""
    return Path(user_config_dir(APP_NAME)) / USER_SETTINGS_NAME


def load_settings(
    project_dir: Union[str, Path],
    config_path: Optional[Union[str, Path]] = None,
    user_config_path: Optional[Path] = None,
    **overrides: Any,
) -> WizardSettings:
    """Build WizardSettings from defaults, settings files and overrides.

    Args:
        project_dir: Project directory (configs and formatter cwd)
        config_path: Explicit settings file; replaces the project .fmtwizard.yaml layer
        user_config_path: User settings file (default: platform user config dir)
        **overrides: Field overrides; None values are ignored

    Returns:
        Resolved WizardSettings

    Raises:
        ConfigurationError: If a settings file is malformed or config_path is missing
    """
    project = Path(project_dir)
    settings = WizardSettings(project_dir=project)

    user_file = user_config_path if user_config_path is not None else user_settings_path()
    settings = _apply_file(settings, user_file, required=False)

    if config_path is not None:
        settings = _apply_file(settings, Path(config_path), required=True)
    else:
        settings = _apply_file(settings, project / PROJECT_SETTINGS_NAME, required=False)

    known = {f.name for f in fields(WizardSettings)}
    updates = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(updates) - known
    if unknown:
        raise TypeError(f"Unknown settings override(s): {', '.join(sorted(unknown))}")
    if updates:
        settings = replace(settings, **updates)

    logger.debug(f"Resolved settings: {settings}")
    return settings


def _apply_file(settings: WizardSettings, path: Path, required: bool) -> WizardSettings:
    """Overlay one YAML settings file onto settings."""
    if not path.exists():
        if required:
            raise ConfigurationError("Settings file not found", file_path=str(path))
        logger.debug(f"No settings file at {path}")
        return settings

    data = _read_yaml(path)
    logger.debug(f"Loaded settings from {path}")
    return replace(settings, **_validate_settings(data, path))


def _read_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, converting parse failures to ConfigurationError."""
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise ConfigurationError(f"Invalid YAML: {e}", file_path=str(path), line_number=line) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings must be a YAML mapping", file_path=str(path))
    return data


def _validate_settings(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Check types of known keys and map them to WizardSettings fields."""
    updates: dict[str, Any] = {}

    for key, value in data.items():
        if key not in _SETTINGS_KEYS:
            logger.warning(f"Ignoring unknown setting '{key}' in {path}")
            continue

        if key == "tool_timeout":
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0):
                raise ConfigurationError("tool_timeout must be a positive number or null", file_path=str(path))
            updates[_SETTINGS_KEYS[key]] = float(value) if value is not None else None
            continue

        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"{key} must be a non-empty string", file_path=str(path))

        if key == "log_level":
            value = value.upper()
            if value not in _VALID_LOG_LEVELS:
                raise ConfigurationError(
                    f"Invalid log_level: {value}. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}",
                    file_path=str(path),
                )

        updates[_SETTINGS_KEYS[key]] = value

    return updates
