"""Enable git's in-memory credential cache."""

from collections.abc import Sequence

import structlog

from gitcredentials.credentials.models import Credential
from gitcredentials.engine.stages.base import ProvisioningStage

log = structlog.get_logger(__name__)

CREDENTIAL_HELPER_KEY = "credential.helper"


class CacheInitializationStage(ProvisioningStage):
    """Point ``credential.helper`` at ``git credential-cache``.

    The cache helper keeps entries in daemon memory only, for
    ``cache_timeout`` seconds. Runs once regardless of the credential count.
    """

    name = "cache_initialization"

    async def execute(self, credentials: Sequence[Credential]) -> None:
        timeout = self.configuration.cache_timeout
        log.info("initializing_credential_cache", timeout=timeout)
        await self.config_store.set(CREDENTIAL_HELPER_KEY, f"cache --timeout {timeout}")
