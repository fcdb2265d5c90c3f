"""
Base class for provisioning stages.

The build phase runs three stages, in order, over the resolved credentials:

    1. CacheInitializationStage: enable git's in-memory credential cache
    2. UrlRewriteStage: per-credential username and SSH-to-HTTPS rewrite
    3. CachePopulationStage: per-credential ``git credential approve``

Stages process credentials strictly in resolution order and stop at the
first error. Nothing written by earlier stages or earlier credentials is
undone.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from gitcredentials.config.metadata import BuildpackConfiguration
from gitcredentials.credentials.models import Credential
from gitcredentials.git.config_store import GitConfigStore
from gitcredentials.git.credential_cache import CredentialCache


class ProvisioningStage(ABC):
    """Abstract base class for all provisioning stages.

    Attributes:
        config_store: Global git configuration to write into
        credential_cache: Destination for approved credentials
        configuration: Buildpack defaults (cache timeout)
    """

    name: str = "stage"

    def __init__(
        self,
        config_store: GitConfigStore,
        credential_cache: CredentialCache,
        configuration: BuildpackConfiguration,
    ) -> None:
        self.config_store = config_store
        self.credential_cache = credential_cache
        self.configuration = configuration

    @abstractmethod
    async def execute(self, credentials: Sequence[Credential]) -> None:
        """Apply this stage to the resolved credentials.

        Raises:
            GitCredentialsError: On the first failure; later credentials are
                not processed
        """
        pass
