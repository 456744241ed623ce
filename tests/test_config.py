"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from flatsite.config import (
    DEFAULT_WATCH_PATTERNS,
    Config,
    LiveReloadConfig,
    ServerConfig,
    SiteConfig,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "flatsite.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[site]
app_root = "www"
autoescape = false

[live_reload]
enabled = true
watch_patterns = ["**/*.html"]
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.site.app_root == tmp_path / "www"
        assert config.site.autoescape is False
        assert config.live_reload.enabled is True
        assert config.live_reload.watch_patterns == ["**/*.html"]
        assert config.config_path == config_file

    def test__empty_file__uses_defaults(self, tmp_path: Path) -> None:
        """Use defaults and the config directory as app root."""
        config_file = tmp_path / "flatsite.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.site.app_root == tmp_path
        assert config.site.autoescape is True
        assert config.live_reload.enabled is False
        assert config.live_reload.watch_patterns == DEFAULT_WATCH_PATTERNS

    def test__missing_explicit_path__raises(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for a missing explicit config."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__no_config_discovered__returns_defaults(self, tmp_path: Path) -> None:
        """Fall back to defaults when no config file exists."""
        with patch("flatsite.config.Path.cwd", return_value=tmp_path):
            config = Config.load()

        assert config.config_path is None
        assert config.site == SiteConfig()

    def test__config_in_parent__discovered(self, tmp_path: Path) -> None:
        """Find flatsite.toml in a parent directory."""
        (tmp_path / "flatsite.toml").write_text("[server]\nport = 9000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        with patch("flatsite.config.Path.cwd", return_value=nested):
            config = Config.load()

        assert config.server.port == 9000
        assert config.config_path == tmp_path / "flatsite.toml"

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ("[server]\nport = \"80\"", "server.port must be an integer"),
            ("[site]\napp_root = 1", "site.app_root must be a string"),
            ("[site]\nautoescape = \"yes\"", "site.autoescape must be a boolean"),
            ("[live_reload]\nwatch_patterns = [1]", "watch_patterns items must be strings"),
            ("[server\n", "Invalid configuration file"),
        ],
    )
    def test__invalid_values__raise(self, tmp_path: Path, content: str, message: str) -> None:
        """Raise ValueError naming the offending key."""
        config_file = tmp_path / "flatsite.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides__applied_without_mutation(self, tmp_path: Path) -> None:
        """Return a new config, leaving the original untouched."""
        config = Config(
            server=ServerConfig(),
            site=SiteConfig(),
            live_reload=LiveReloadConfig(),
        )

        updated = config.with_overrides(port=9999, app_root=tmp_path, live_reload_enabled=True)

        assert updated.server.port == 9999
        assert updated.server.host == "127.0.0.1"
        assert updated.site.app_root == tmp_path
        assert updated.live_reload.enabled is True
        assert config.server.port == 8080
        assert config.live_reload.enabled is False

    def test__no_overrides__same_values(self) -> None:
        """Keep every value when nothing is overridden."""
        config = Config(server=ServerConfig(), site=SiteConfig(), live_reload=LiveReloadConfig())

        assert config.with_overrides() == config
