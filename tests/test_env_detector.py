"""Tests for package runner detection."""

from unittest.mock import patch

import pytest

from fmtwizard.settings import WizardSettings
from fmtwizard.setup.env_detector import ToolInfo, detect_runner


class TestToolInfo:
    """Test suite for ToolInfo dataclass."""

    def test_tool_info_immutable(self):
        """ToolInfo should be immutable (frozen)."""
        tool = ToolInfo(name="npx", path="/usr/bin/npx")

        with pytest.raises(AttributeError):
            tool.path = None

    def test_found_follows_path(self):
        assert ToolInfo(name="npx", path="/usr/bin/npx").found is True
        assert ToolInfo(name="npx", path=None).found is False


class TestDetectRunner:
    """Test suite for detect_runner function."""

    @patch("fmtwizard.setup.env_detector.shutil.which")
    def test_runner_found(self, mock_which, settings):
        """Configured runner resolved to its absolute path."""
        mock_which.return_value = "/usr/local/bin/npx"

        info = detect_runner(settings)

        assert info == ToolInfo(name="npx", path="/usr/local/bin/npx")
        mock_which.assert_called_once_with("npx")

    @patch("fmtwizard.setup.env_detector.shutil.which")
    def test_windows_style_path_kept_verbatim(self, mock_which, settings):
        """The PATHEXT-resolved name (npx.CMD) is what gets reported."""
        mock_which.return_value = r"C:\Program Files\nodejs\npx.CMD"

        assert detect_runner(settings).path == r"C:\Program Files\nodejs\npx.CMD"

    @patch("fmtwizard.setup.env_detector.shutil.which")
    def test_runner_missing(self, mock_which, project_dir):
        """Missing runner is reported, not raised."""
        mock_which.return_value = None

        info = detect_runner(WizardSettings(project_dir=project_dir, package_runner="pnpx"))

        assert info.name == "pnpx"
        assert info.found is False
        assert info.path is None

    @patch("fmtwizard.setup.env_detector.shutil.which")
    def test_lookup_error_degrades(self, mock_which, settings):
        """Filesystem errors during lookup mark the runner as not found."""
        mock_which.side_effect = PermissionError("denied")

        assert detect_runner(settings).found is False

    @patch("subprocess.run")
    @patch("fmtwizard.setup.env_detector.shutil.which")
    def test_no_process_spawned(self, mock_which, mock_run, settings):
        """Detection is a PATH lookup only."""
        mock_which.return_value = "/usr/local/bin/npx"

        detect_runner(settings)

        mock_run.assert_not_called()
