"""Credential taken from ``GIT_CREDENTIALS_*`` environment variables."""

import structlog

from gitcredentials.config.metadata import BuildpackConfiguration
from gitcredentials.config.settings import EnvironmentCredentialSettings
from gitcredentials.credentials.models import Credential

log = structlog.get_logger(__name__)


def resolve_from_environment(
    configuration: BuildpackConfiguration,
    settings: EnvironmentCredentialSettings | None = None,
) -> Credential | None:
    """Build the environment credential, or None without a full login.

    ``GIT_CREDENTIALS_USERNAME`` and ``GIT_CREDENTIALS_PASSWORD`` must both
    be set and non-empty. Protocol, host, path and URL come from their
    ``GIT_CREDENTIALS_*`` variables, or from the buildpack defaults when
    those are unset or empty.

    Args:
        configuration: Defaults from buildpack.toml
        settings: Pre-loaded environment settings; read from os.environ if None
    """
    env = settings if settings is not None else EnvironmentCredentialSettings()
    if not env.has_login:
        return None

    log.info("using_environment_credentials", variables="GIT_CREDENTIALS_USERNAME, GIT_CREDENTIALS_PASSWORD")
    return Credential(
        protocol=env.protocol or configuration.default_protocol,
        host=env.host or configuration.default_host,
        path=env.path or configuration.default_path,
        url=env.url or configuration.default_url,
        username=env.username,
        password=env.password,
    )
