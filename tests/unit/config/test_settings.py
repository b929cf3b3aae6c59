"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from rapport.config import get_settings, reload_settings
from rapport.config.settings import Settings


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration at an empty temporary directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("RAPPORT_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("RAPPORT_ENV", "nonexistent")
    return config_dir


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "rapport"

    def test_nested_defaults(self) -> None:
        """Nested configuration has defaults."""
        settings = Settings()
        assert settings.storage.relationship.backend == "inmemory"
        assert settings.storage.identity.backend == "inmemory"
        assert settings.relationship.public_provider == "organization"
        assert settings.cache.max_entries == 1000
        assert settings.observability.logging.format == "json"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_reads_toml(self, config_dir: Path) -> None:
        """get_settings reads default.toml."""
        (config_dir / "default.toml").write_text(
            "app_name = 'test'\n[relationship]\npublic_provider = 'space'"
        )

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.relationship.public_provider == "space"

    def test_settings_cached(self, config_dir: Path) -> None:
        """get_settings returns cached instance."""
        (config_dir / "default.toml").write_text("app_name = 'cached'")

        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(self, config_dir: Path) -> None:
        """reload_settings returns fresh instance."""
        default_toml = config_dir / "default.toml"
        default_toml.write_text("app_name = 'original'")
        assert get_settings().app_name == "original"

        default_toml.write_text("app_name = 'updated'")

        assert reload_settings().app_name == "updated"


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_top_level_override(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Top-level values can be overridden with env vars."""
        (config_dir / "default.toml").write_text("app_name = 'from-toml'")
        monkeypatch.setenv("RAPPORT_APP_NAME", "from-env")

        assert get_settings().app_name == "from-env"

    def test_unknown_keys_ignored(self, config_dir: Path) -> None:
        """Keys without a settings field are ignored."""
        (config_dir / "default.toml").write_text(
            "debug = true\nlog_level = 'DEBUG'\n[storage.relationship]\nconnection_url = 'x'"
        )

        settings = get_settings()

        assert not hasattr(settings, "debug")
        assert not hasattr(settings, "log_level")
        assert not hasattr(settings.storage.relationship, "connection_url")

    def test_nested_override(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested values can be overridden with double underscore."""
        (config_dir / "default.toml").write_text("[cache]\nmax_entries = 10")
        monkeypatch.setenv("RAPPORT_CACHE__MAX_ENTRIES", "25")

        assert get_settings().cache.max_entries == 25
