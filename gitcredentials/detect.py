"""Participation check.

The buildpack participates when at least one credential can be resolved,
from buildpack.yml or from ``GIT_CREDENTIALS_*`` variables. Nothing is
written to git during detection.
"""

import structlog

from gitcredentials.config.metadata import BuildpackConfiguration, read_configuration
from gitcredentials.credentials.resolver import CredentialResolver
from gitcredentials.exceptions import BuildpackYMLError, NoCredentialsError
from gitcredentials.lifecycle import PLAN_ENTRY_NAME, BuildPlan, DetectContext, DetectResult

log = structlog.get_logger(__name__)

NO_CREDENTIALS_REASON = "could not find GIT credentials in environment or in buildpack.yml"
MALFORMED_YML_REASON = "buildpack.yml is present but cannot be parsed"


def detect(context: DetectContext) -> DetectResult:
    """Decide whether the build phase should run.

    Returns:
        A result carrying the ``gitcredentials`` plan when credentials
        resolve, otherwise a declining result with the reason

    Raises:
        ConfigurationError: If a buildpack directory is given and its
            buildpack.toml cannot be read
    """
    if context.buildpack_info.title:
        log.info(context.buildpack_info.title)

    configuration = (
        read_configuration(context.cnb_path)
        if context.cnb_path is not None
        else BuildpackConfiguration()
    )

    try:
        CredentialResolver(configuration).resolve(context.working_dir)
    except NoCredentialsError:
        return _decline(NO_CREDENTIALS_REASON)
    except BuildpackYMLError as e:
        return _decline(f"{MALFORMED_YML_REASON}: {e.detail}")

    return DetectResult(
        plan=BuildPlan(provides=(PLAN_ENTRY_NAME,), requires=(PLAN_ENTRY_NAME,)),
    )


def _decline(reason: str) -> DetectResult:
    log.warning(f"Not participating: {reason}")
    return DetectResult(reason=reason)
