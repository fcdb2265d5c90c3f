"""Credential model and credential sources.

Credentials come from two places, combined by CredentialResolver:

    - buildpack.yml in the application directory (``parse_buildpack_yml``)
    - ``GIT_CREDENTIALS_*`` environment variables (``resolve_from_environment``)
"""

from gitcredentials.credentials.buildpack_yml import (
    BUILDPACK_YML,
    BuildpackYML,
    load_buildpack_yml,
    parse_buildpack_yml,
)
from gitcredentials.credentials.environment import resolve_from_environment
from gitcredentials.credentials.models import Credential
from gitcredentials.credentials.resolver import CredentialResolver
from gitcredentials.exceptions import BuildpackYMLError, CredentialError, NoCredentialsError

__all__ = [
    "BUILDPACK_YML",
    "BuildpackYML",
    "BuildpackYMLError",
    "Credential",
    "CredentialError",
    "CredentialResolver",
    "NoCredentialsError",
    "load_buildpack_yml",
    "parse_buildpack_yml",
    "resolve_from_environment",
]
