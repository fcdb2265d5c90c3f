"""Buildpack configuration: metadata defaults and environment settings."""

from gitcredentials.config.metadata import (
    DEFAULT_CACHE_TIMEOUT,
    BuildpackConfiguration,
    BuildpackInfoTable,
    BuildpackMetadata,
    read_configuration,
    read_metadata,
)
from gitcredentials.config.settings import EnvironmentCredentialSettings

__all__ = [
    "DEFAULT_CACHE_TIMEOUT",
    "BuildpackConfiguration",
    "BuildpackInfoTable",
    "BuildpackMetadata",
    "EnvironmentCredentialSettings",
    "read_configuration",
    "read_metadata",
]
