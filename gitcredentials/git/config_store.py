"""Access to git's global configuration.

Provisioning writes into the user-wide git config, which every later git
invocation in the build reads. The engine talks to it through the
GitConfigStore protocol so tests can substitute an in-memory store.
"""

from typing import Protocol

from gitcredentials.git.runner import GitCommandRunner


class GitConfigStore(Protocol):
    """Key/value view of a git configuration file."""

    async def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None if unset."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any existing values."""
        ...


class GlobalGitConfig:
    """GitConfigStore backed by ``git config --global``."""

    def __init__(self, runner: GitCommandRunner | None = None) -> None:
        self.runner = runner or GitCommandRunner()

    async def get(self, key: str) -> str | None:
        # git config --get exits 1 for a missing key
        result = await self.runner.run("config", "--global", "--get", key, check=False)
        if result.returncode != 0:
            return None
        return result.stdout.rstrip("\n")

    async def set(self, key: str, value: str) -> None:
        await self.runner.run("config", "--global", "--replace-all", key, value)
