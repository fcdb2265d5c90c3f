"""Per-build provisioning environment.

BuildEnvironment holds everything one build invocation needs: the resolved
credentials, the buildpack configuration and the git backends. It runs the
provisioning stages in order and is discarded when the build ends.

Example:
    >>> env = BuildEnvironment(credentials=credentials, configuration=configuration)
    >>> await env.provision()
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from gitcredentials.config.metadata import BuildpackConfiguration
from gitcredentials.credentials.models import Credential
from gitcredentials.engine.stages import (
    CacheInitializationStage,
    CachePopulationStage,
    ProvisioningStage,
    UrlRewriteStage,
)
from gitcredentials.git.config_store import GitConfigStore, GlobalGitConfig
from gitcredentials.git.credential_cache import CredentialCache, GitCredentialCache
from gitcredentials.git.runner import GitCommandRunner

log = structlog.get_logger(__name__)


def _default_runner() -> GitCommandRunner:
    return GitCommandRunner()


@dataclass
class BuildEnvironment:
    """State for provisioning one build.

    Attributes:
        credentials: Resolved credentials, in provisioning order
        configuration: Buildpack defaults
        runner: git runner shared by the default backends
        config_store: Global git configuration; git-backed when not given
        credential_cache: Credential cache; git-backed when not given
    """

    credentials: Sequence[Credential]
    configuration: BuildpackConfiguration = field(default_factory=BuildpackConfiguration)
    runner: GitCommandRunner = field(default_factory=_default_runner)
    config_store: GitConfigStore | None = None
    credential_cache: CredentialCache | None = None

    def __post_init__(self) -> None:
        self.credentials = tuple(self.credentials)
        if self.config_store is None:
            self.config_store = GlobalGitConfig(self.runner)
        if self.credential_cache is None:
            self.credential_cache = GitCredentialCache(self.runner)

    async def _run(self, stage_class: type[ProvisioningStage]) -> None:
        assert self.config_store is not None
        assert self.credential_cache is not None
        stage = stage_class(self.config_store, self.credential_cache, self.configuration)
        log.info("running_stage", stage=stage.name, credentials=len(self.credentials))
        await stage.execute(self.credentials)

    async def initialize(self) -> None:
        """Enable the in-memory credential cache."""
        await self._run(CacheInitializationStage)

    async def configure(self) -> None:
        """Register usernames and SSH-to-HTTPS rewrites."""
        await self._run(UrlRewriteStage)

    async def store_credentials(self) -> None:
        """Approve every credential into the cache."""
        await self._run(CachePopulationStage)

    async def provision(self) -> None:
        """Run all stages in order, stopping at the first error.

        Raises:
            GitCredentialsError: Propagated unchanged from the failing stage
        """
        await self.initialize()
        await self.configure()
        await self.store_credentials()
        log.info("provisioning_complete", credentials=len(self.credentials))
