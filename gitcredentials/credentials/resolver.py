"""Combine the credential sources into the ordered set to provision."""

from pathlib import Path

import structlog

from gitcredentials.config.metadata import BuildpackConfiguration
from gitcredentials.config.settings import EnvironmentCredentialSettings
from gitcredentials.credentials.buildpack_yml import BUILDPACK_YML, parse_buildpack_yml
from gitcredentials.credentials.environment import resolve_from_environment
from gitcredentials.credentials.models import Credential
from gitcredentials.exceptions import NoCredentialsError

log = structlog.get_logger(__name__)


class CredentialResolver:
    """Resolve the credentials for one build.

    Sources are consulted in a fixed order and concatenated:

    1. Credentials declared in ``<working_dir>/buildpack.yml``, in file order
    2. The credential from ``GIT_CREDENTIALS_*`` variables, if complete

    Provisioning applies them in that order, so the environment credential
    wins when it shares an effective URL with a declared one.

    Example:
        >>> resolver = CredentialResolver(configuration)
        >>> credentials = resolver.resolve(Path("/workspace"))
    """

    def __init__(
        self,
        configuration: BuildpackConfiguration | None = None,
        settings: EnvironmentCredentialSettings | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            configuration: Buildpack defaults; empty when not given
            settings: Environment settings; loaded from os.environ on each
                resolve when not given
        """
        self.configuration = configuration or BuildpackConfiguration()
        self._settings = settings

    def resolve(self, working_dir: Path | str) -> list[Credential]:
        """Return the credentials to provision, never empty.

        Raises:
            BuildpackYMLError: If buildpack.yml is malformed
            NoCredentialsError: If neither source yields a credential
        """
        credentials = list(parse_buildpack_yml(Path(working_dir) / BUILDPACK_YML))

        env_credential = resolve_from_environment(self.configuration, self._settings)
        if env_credential is not None:
            credentials.append(env_credential)

        if not credentials:
            raise NoCredentialsError()

        log.debug("credentials_resolved", count=len(credentials))
        return credentials
