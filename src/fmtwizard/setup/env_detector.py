"""Environment detection for the fmtwizard setup wizard.

Resolves the package runner (npx by default) used to launch ESLint and
Prettier. shutil.which() applies PATHEXT on Windows, so the resolved path
(e.g., npx.CMD) is what the formatter step should execute.
"""

import logging
import shutil
from dataclasses import dataclass
from typing import Optional

from ..settings import WizardSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolInfo:
    """Information about a detected executable.

    Attributes:
        name: Executable name as configured (e.g., npx)
        path: Absolute path to the executable (None if not found)
    """

    name: str
    path: Optional[str]

    @property
    def found(self) -> bool:
        return self.path is not None


def detect_runner(settings: WizardSettings) -> ToolInfo:
    """Resolve the configured package runner on PATH.

    Never raises: lookup errors are logged and reported as not found.

    Args:
        settings: Resolved wizard settings

    Returns:
        ToolInfo for settings.package_runner
    """
    name = settings.package_runner
    try:
        path = shutil.which(name)
    except OSError as e:
        logger.warning(f"Error detecting {name}: {e}")
        path = None

    if path is None:
        logger.debug(f"{name} not found in PATH")
    else:
        logger.debug(f"Found {name} at {path}")
    return ToolInfo(name=name, path=path)
