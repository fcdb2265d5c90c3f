"""Provisioning phase.

Reads the buildpack defaults, resolves credentials, provisions them into
git's global configuration and credential cache, and registers the
``gitcredentials`` layer.
"""

import structlog

from gitcredentials.config.metadata import read_configuration
from gitcredentials.credentials.resolver import CredentialResolver
from gitcredentials.engine.environment import BuildEnvironment
from gitcredentials.git.config_store import GitConfigStore
from gitcredentials.git.credential_cache import CredentialCache
from gitcredentials.git.runner import GitCommandRunner
from gitcredentials.lifecycle import LAYER_NAME, BuildContext, BuildResult, Layer

log = structlog.get_logger(__name__)


async def build(
    context: BuildContext,
    runner: GitCommandRunner | None = None,
    config_store: GitConfigStore | None = None,
    credential_cache: CredentialCache | None = None,
) -> BuildResult:
    """Provision git credentials for the rest of the build.

    Args:
        context: Lifecycle inputs
        runner: git runner for the default backends
        config_store: Override for the global git configuration
        credential_cache: Override for the credential cache

    Returns:
        Result with the single, non-cached, build-time-only credentials layer

    Raises:
        ConfigurationError: If buildpack.toml is missing or malformed
        BuildpackYMLError: If buildpack.yml is malformed
        NoCredentialsError: If no credential could be resolved
        CommandError: If any git invocation fails
    """
    if context.buildpack_info.title:
        log.info(context.buildpack_info.title)

    configuration = read_configuration(context.cnb_path)
    credentials = CredentialResolver(configuration).resolve(context.working_dir)

    env = BuildEnvironment(
        credentials=credentials,
        configuration=configuration,
        runner=runner or GitCommandRunner(),
        config_store=config_store,
        credential_cache=credential_cache,
    )
    await env.provision()

    layer = Layer(name=LAYER_NAME, path=context.layers_dir / LAYER_NAME)
    return BuildResult(layers=(layer,))
