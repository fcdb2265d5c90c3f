"""Register usernames and SSH-to-HTTPS rewrites in the global git config."""

from collections.abc import Sequence

import structlog

from gitcredentials.credentials.models import Credential
from gitcredentials.engine.stages.base import ProvisioningStage

log = structlog.get_logger(__name__)


def username_key(credential: Credential) -> str:
    """``credential.<effective_url>.username``"""
    return f"credential.{credential.effective_url}.username"


def instead_of_key(credential: Credential) -> str:
    """``url.<effective_url>.insteadOf``"""
    return f"url.{credential.effective_url}.insteadOf"


class UrlRewriteStage(ProvisioningStage):
    """Configure git to authenticate over HTTPS for every credential.

    For each credential two keys are written:

        credential.<effective_url>.username = <username>
        url.<effective_url>.insteadOf       = git@<host>:

    so that ``git@host:org/repo.git`` remotes are fetched over HTTPS with the
    cached password. Credentials sharing an effective URL overwrite each
    other; the last one wins.
    """

    name = "url_rewrite"

    async def execute(self, credentials: Sequence[Credential]) -> None:
        log.info("configuring_https_authentication", credentials=len(credentials))
        for credential in credentials:
            log.debug(
                "configuring_credential",
                url=credential.effective_url,
                username=credential.username,
            )
            await self.config_store.set(username_key(credential), credential.username)
            await self.config_store.set(instead_of_key(credential), credential.ssh_shorthand)
