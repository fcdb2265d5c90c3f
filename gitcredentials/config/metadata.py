"""Buildpack metadata reader.

The buildpack ships a ``buildpack.toml`` whose ``[metadata.configuration]``
table carries the defaults used to complete credentials taken from the
environment, plus the cache timeout::

    [buildpack]
    id = "avarteq/gitcredentials"
    name = "Git Credentials Buildpack"
    version = "1.0.0"

    [metadata.configuration]
    default_timeout = "3600"
    default_protocol = "https"
    default_host = "github.com"
    default_path = "/"
    default_url = ""

A document without the table yields an all-empty configuration. A document
that cannot be opened or decoded is an error.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gitcredentials.exceptions import MetadataParseError, MetadataReadError

BUILDPACK_TOML = "buildpack.toml"
DEFAULT_CACHE_TIMEOUT = 3600


class BuildpackConfiguration(BaseModel):
    """Static defaults from ``[metadata.configuration]``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    default_timeout: str = Field(default="", description="credential-cache timeout in seconds")
    default_protocol: str = Field(default="", description="Protocol for environment credentials")
    default_host: str = Field(default="", description="Host for environment credentials")
    default_path: str = Field(default="", description="Path for environment credentials")
    default_url: str = Field(default="", description="Full URL for environment credentials")

    @field_validator("default_timeout", mode="before")
    @classmethod
    def normalize_timeout(cls, v: Any) -> Any:
        """Accept ``default_timeout = 3600`` as well as the quoted form."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("default_timeout")
    @classmethod
    def validate_timeout(cls, v: str) -> str:
        if v and not v.strip().isdigit():
            raise ValueError(f"default_timeout must be a number of seconds, got {v!r}")
        return v.strip()

    @property
    def cache_timeout(self) -> int:
        """Seconds the credential cache keeps entries, 3600 when unset."""
        if self.default_timeout:
            return int(self.default_timeout)
        return DEFAULT_CACHE_TIMEOUT


class BuildpackInfoTable(BaseModel):
    """The ``[buildpack]`` table, used for the phase title line."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    name: str = ""
    version: str = ""


class _MetadataTable(BaseModel):
    model_config = ConfigDict(extra="ignore")

    configuration: BuildpackConfiguration = Field(default_factory=BuildpackConfiguration)


class BuildpackMetadata(BaseModel):
    """Recognized parts of a ``buildpack.toml`` document."""

    model_config = ConfigDict(extra="ignore")

    api: str = ""
    buildpack: BuildpackInfoTable = Field(default_factory=BuildpackInfoTable)
    metadata: _MetadataTable = Field(default_factory=_MetadataTable)

    @classmethod
    def from_toml(cls, path: Path) -> BuildpackMetadata:
        """Load and validate a buildpack.toml document.

        Raises:
            MetadataReadError: If the file cannot be opened
            MetadataParseError: If it is not TOML or a table has the wrong shape
        """
        try:
            with open(path, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise MetadataParseError(path, str(e)) from e
        except OSError as e:
            raise MetadataReadError(path, e.strerror or str(e)) from e

        try:
            return cls.model_validate(document)
        except ValidationError as e:
            raise MetadataParseError(path, str(e)) from e


def read_metadata(cnb_path: Path | str) -> BuildpackMetadata:
    """Read ``buildpack.toml`` from the buildpack directory."""
    return BuildpackMetadata.from_toml(Path(cnb_path) / BUILDPACK_TOML)


def read_configuration(cnb_path: Path | str) -> BuildpackConfiguration:
    """Return the ``[metadata.configuration]`` defaults for the buildpack.

    Args:
        cnb_path: Buildpack directory containing buildpack.toml

    Returns:
        The configuration, all fields empty when the table is absent

    Raises:
        MetadataReadError: If buildpack.toml cannot be opened
        MetadataParseError: If buildpack.toml is malformed
    """
    return read_metadata(cnb_path).metadata.configuration
