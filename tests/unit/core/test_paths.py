"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from pfind.core.paths import APP_NAME, get_config_dir, get_config_path


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestGetConfigPath:
    """Tests for get_config_path function."""

    def test_config_file_name(self, tmp_path: Path) -> None:
        """The config file is config.toml inside the config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_path()

        assert result == tmp_path / APP_NAME / "config.toml"
