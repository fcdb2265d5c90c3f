"""Tests for gitcredentials.config.metadata."""

from pathlib import Path

import pytest

from gitcredentials.config import BuildpackConfiguration, read_configuration, read_metadata
from gitcredentials.exceptions import (
    ConfigurationError,
    MetadataParseError,
    MetadataReadError,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class TestReadConfiguration:
    """Reading [metadata.configuration] from buildpack.toml."""

    def test_missing_buildpack_toml_raises_read_error(self, tmp_path: Path):
        with pytest.raises(MetadataReadError) as exc_info:
            read_configuration(tmp_path)

        assert exc_info.value.path == tmp_path / "buildpack.toml"
        assert "buildpack.toml" in str(exc_info.value)

    def test_read_error_is_configuration_error(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            read_configuration(tmp_path)

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path):
        (tmp_path / "buildpack.toml").write_text((FIXTURES_DIR / "invalid_buildpack.toml").read_text())

        with pytest.raises(MetadataParseError) as exc_info:
            read_configuration(tmp_path)

        assert exc_info.value.detail

    def test_missing_configuration_table_returns_empty_configuration(self, tmp_path: Path):
        (tmp_path / "buildpack.toml").write_text("[buildpack]\n")

        configuration = read_configuration(tmp_path)

        assert configuration == BuildpackConfiguration()
        assert configuration.default_protocol == ""
        assert configuration.default_host == ""

    def test_reads_configuration(self, cnb_dir: Path):
        configuration = read_configuration(cnb_dir)

        assert configuration == BuildpackConfiguration(
            default_timeout="3600",
            default_protocol="https",
            default_host="github.com",
            default_path="/",
            default_url="",
        )

    def test_integer_timeout_is_accepted(self, tmp_path: Path):
        (tmp_path / "buildpack.toml").write_text("[metadata.configuration]\ndefault_timeout = 900\n")

        configuration = read_configuration(tmp_path)

        assert configuration.default_timeout == "900"
        assert configuration.cache_timeout == 900

    def test_non_numeric_timeout_raises_parse_error(self, tmp_path: Path):
        (tmp_path / "buildpack.toml").write_text('[metadata.configuration]\ndefault_timeout = "soon"\n')

        with pytest.raises(MetadataParseError, match="default_timeout"):
            read_configuration(tmp_path)

    def test_wrongly_typed_table_raises_parse_error(self, tmp_path: Path):
        (tmp_path / "buildpack.toml").write_text("[metadata]\nconfiguration = 5\n")

        with pytest.raises(MetadataParseError):
            read_configuration(tmp_path)


class TestCacheTimeout:
    """Default cache timeout handling."""

    def test_defaults_to_one_hour(self):
        assert BuildpackConfiguration().cache_timeout == 3600

    def test_uses_configured_value(self):
        assert BuildpackConfiguration(default_timeout="120").cache_timeout == 120


class TestReadMetadata:
    """The [buildpack] table."""

    def test_reads_buildpack_identity(self, cnb_dir: Path):
        metadata = read_metadata(cnb_dir)

        assert metadata.buildpack.name == "Some Buildpack"
        assert metadata.buildpack.version == "some-version"
