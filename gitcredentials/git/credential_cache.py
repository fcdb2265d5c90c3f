"""Feeding credentials to git's credential helpers."""

from typing import Protocol

from gitcredentials.credentials.models import Credential
from gitcredentials.git.runner import GitCommandRunner


class CredentialCache(Protocol):
    """Something that accepts approved credentials."""

    async def approve(self, credential: Credential) -> None:
        """Store ``credential`` so later git operations can use it."""
        ...


class GitCredentialCache:
    """CredentialCache backed by ``git credential approve``.

    git hands the approved credential to every configured
    ``credential.helper``; with the cache helper enabled it lands in the
    in-memory credential-cache daemon.
    """

    def __init__(self, runner: GitCommandRunner | None = None) -> None:
        self.runner = runner or GitCommandRunner()

    async def approve(self, credential: Credential) -> None:
        await self.runner.run_with_input(
            "credential", "approve", input_text=credential.approval_input()
        )
