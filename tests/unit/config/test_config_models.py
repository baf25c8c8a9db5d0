"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from nativepath.config.models import Config, LoggingConfig, PathsConfig, TempConfig


class TestPathsConfig:
    """Tests for PathsConfig."""

    def test_encoding_names_are_normalized(self) -> None:
        """Codec aliases are stored under their canonical name."""
        config = PathsConfig(posix_encoding="UTF8", locale_encoding="latin-1")
        assert config.posix_encoding == "utf-8"
        assert config.locale_encoding == "iso8859-1"

    def test_unknown_encoding_rejected(self) -> None:
        """Unknown codecs fail validation."""
        with pytest.raises(ValidationError):
            PathsConfig(posix_encoding="no-such-codec")

    def test_unknown_flavour_rejected(self) -> None:
        """Only auto, windows and posix are accepted."""
        with pytest.raises(ValidationError):
            PathsConfig(flavour="vms")  # type: ignore[arg-type]

    @pytest.mark.parametrize("max_path", [0, 40000])
    def test_max_path_bounds(self, max_path: int) -> None:
        """max_path must be a plausible length."""
        with pytest.raises(ValidationError):
            PathsConfig(max_path=max_path)


class TestTempConfig:
    """Tests for TempConfig."""

    def test_directory_expanded(self) -> None:
        """User directories are expanded and resolved."""
        config = TempConfig(directory="~/scratch")
        assert config.directory == (Path.home() / "scratch").resolve()

    def test_empty_directory_is_none(self) -> None:
        """An empty string means the system default."""
        assert TempConfig(directory="").directory is None


class TestConfigEnvironment:
    """Tests for environment overrides."""

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """NATIVEPATH_<SECTION>__<KEY> overrides nested values."""
        monkeypatch.setenv("NATIVEPATH_PATHS__FLAVOUR", "posix")
        monkeypatch.setenv("NATIVEPATH_LOGGING__LEVEL", "DEBUG")
        config = Config()
        assert config.paths.flavour == "posix"
        assert config.logging.level == "DEBUG"

    def test_defaults(self) -> None:
        """Defaults need no environment."""
        config = Config()
        assert isinstance(config.logging, LoggingConfig)
        assert config.logging.format == "console"
