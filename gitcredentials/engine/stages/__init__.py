"""Provisioning stages."""

from gitcredentials.engine.stages.base import ProvisioningStage
from gitcredentials.engine.stages.cache_initialization import CacheInitializationStage
from gitcredentials.engine.stages.cache_population import CachePopulationStage
from gitcredentials.engine.stages.url_rewrite import UrlRewriteStage

__all__ = [
    "CacheInitializationStage",
    "CachePopulationStage",
    "ProvisioningStage",
    "UrlRewriteStage",
]
