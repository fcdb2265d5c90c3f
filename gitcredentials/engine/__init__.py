"""Provisioning engine.

BuildEnvironment drives three stages over the resolved credentials:

    - CacheInitializationStage: ``credential.helper = cache --timeout N``
    - UrlRewriteStage: usernames and ``insteadOf`` rewrites per credential
    - CachePopulationStage: ``git credential approve`` per credential
"""

from gitcredentials.engine.environment import BuildEnvironment
from gitcredentials.engine.stages import (
    CacheInitializationStage,
    CachePopulationStage,
    ProvisioningStage,
    UrlRewriteStage,
)

__all__ = [
    "BuildEnvironment",
    "CacheInitializationStage",
    "CachePopulationStage",
    "ProvisioningStage",
    "UrlRewriteStage",
]
