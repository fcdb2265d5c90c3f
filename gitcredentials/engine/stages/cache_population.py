"""Hand every credential to the credential cache."""

from collections.abc import Sequence

import structlog

from gitcredentials.credentials.models import Credential
from gitcredentials.engine.stages.base import ProvisioningStage

log = structlog.get_logger(__name__)


class CachePopulationStage(ProvisioningStage):
    """Approve each credential, one ``git credential approve`` per credential."""

    name = "cache_population"

    async def execute(self, credentials: Sequence[Credential]) -> None:
        log.info("adding_credentials_to_cache", credentials=len(credentials))
        for credential in credentials:
            await self.credential_cache.approve(credential)
            log.info("credential_added", url=credential.effective_url, username=credential.username)
