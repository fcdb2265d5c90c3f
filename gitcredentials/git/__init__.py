"""git process access: command runner, global config store, credential cache."""

from gitcredentials.git.config_store import GitConfigStore, GlobalGitConfig
from gitcredentials.git.credential_cache import CredentialCache, GitCredentialCache
from gitcredentials.git.runner import CommandResult, GitCommandRunner

__all__ = [
    "CommandResult",
    "CredentialCache",
    "GitCommandRunner",
    "GitConfigStore",
    "GitCredentialCache",
    "GlobalGitConfig",
]
