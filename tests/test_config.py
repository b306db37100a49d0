"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from regcheck.config import CheckerConfig, LogFormat, RegistryPaths, DEFAULT_DESCRIPTOR_URL


class TestCheckerConfigDefaults:
    """Test default configuration values."""

    def test_default_not_ci(self):
        config = CheckerConfig()
        assert config.ci is False

    def test_default_timeout(self):
        config = CheckerConfig()
        assert config.http_timeout_seconds == 10.0

    def test_default_no_retries(self):
        config = CheckerConfig()
        assert config.max_retries == 0

    def test_default_descriptor_template(self):
        config = CheckerConfig()
        assert config.descriptor_url_template == DEFAULT_DESCRIPTOR_URL

    def test_default_log_format(self):
        config = CheckerConfig()
        assert config.log_format == LogFormat.CONSOLE

    def test_images_checked_by_default(self):
        config = CheckerConfig()
        assert config.check_images is True


class TestCheckerConfigEnvVars:
    """Test configuration from environment variables."""

    @pytest.mark.parametrize("value", ["true", "1", "woodpecker", "0"])
    def test_any_non_empty_ci_value_means_ci(self, monkeypatch, value):
        monkeypatch.setenv("CI", value)
        config = CheckerConfig()
        assert config.ci is True

    def test_empty_ci_value_means_local(self, monkeypatch):
        monkeypatch.setenv("CI", "")
        config = CheckerConfig()
        assert config.ci is False

    def test_prefixed_ci_variable(self, monkeypatch):
        monkeypatch.setenv("REGCHECK_CI", "1")
        config = CheckerConfig()
        assert config.ci is True

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("REGCHECK_HTTP_TIMEOUT_SECONDS", "2.5")
        config = CheckerConfig()
        assert config.http_timeout_seconds == 2.5

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("REGCHECK_LOG_FORMAT", "json")
        config = CheckerConfig()
        assert config.log_format == LogFormat.JSON

    def test_registry_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("REGCHECK_REGISTRY_PATH", str(tmp_path / "r.yaml"))
        config = CheckerConfig()
        assert config.paths().registry_path == tmp_path / "r.yaml"


class TestRegistryPaths:
    """Test execution-context path selection."""

    def test_local_paths_use_parent_dir(self):
        paths = CheckerConfig(ci=False).paths()
        assert paths == RegistryPaths(
            registry_path=Path("..") / "registry.yaml",
            restricted_path=Path("..") / "restricted-usernames.yaml",
        )

    def test_ci_paths_use_current_dir(self):
        paths = CheckerConfig(ci=True).paths()
        assert paths.registry_path == Path(".") / "registry.yaml"
        assert paths.restricted_path == Path(".") / "restricted-usernames.yaml"

    def test_explicit_paths_win(self, tmp_path):
        config = CheckerConfig(
            ci=True,
            registry_path=tmp_path / "users.yaml",
            restricted_path=tmp_path / "blocked.yaml",
        )
        paths = config.paths()
        assert paths.registry_path == tmp_path / "users.yaml"
        assert paths.restricted_path == tmp_path / "blocked.yaml"


class TestLogFormatEnum:
    """Test LogFormat enum values."""

    def test_log_formats(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"
