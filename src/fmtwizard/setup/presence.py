"""Detection of existing ESLint/Prettier config files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..settings import WizardSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigPresence:
    """Which of the two config files already exist.

    Attributes:
        eslint_path: Expected ESLint config location
        prettier_path: Expected Prettier config location
        eslint_exists: Whether the ESLint config exists
        prettier_exists: Whether the Prettier config exists
    """

    eslint_path: Path
    prettier_path: Path
    eslint_exists: bool
    prettier_exists: bool

    @property
    def all_present(self) -> bool:
        return self.eslint_exists and self.prettier_exists

    @property
    def missing(self) -> list[Path]:
        """Paths of the config files that do not exist yet."""
        found = [(self.eslint_path, self.eslint_exists), (self.prettier_path, self.prettier_exists)]
        return [path for path, exists in found if not exists]


def _exists(path: Path) -> bool:
    """Return whether path exists, propagating errors other than "not found".

    Path.exists() hides PermissionError on some Python versions, so stat is
    called directly.
    """
    try:
        path.stat()
    except FileNotFoundError:
        return False
    return True


def check_config_presence(settings: WizardSettings) -> ConfigPresence:
    """Check for the ESLint and Prettier configs in the project directory.

    Args:
        settings: Resolved wizard settings

    Returns:
        ConfigPresence for both config files

    Raises:
        OSError: If the filesystem cannot be queried (e.g., permission denied)
    """
    presence = ConfigPresence(
        eslint_path=settings.eslint_config_path,
        prettier_path=settings.prettier_config_path,
        eslint_exists=_exists(settings.eslint_config_path),
        prettier_exists=_exists(settings.prettier_config_path),
    )
    logger.debug(f"Config presence: eslint={presence.eslint_exists} prettier={presence.prettier_exists}")
    return presence
