"""CLI entry point for the buildpack phases.

The lifecycle invokes ``bin/detect <platform> <plan>`` and
``bin/build <layers> <platform> <plan>`` from the application directory,
with ``CNB_BUILDPACK_DIR`` pointing at the buildpack. Both scripts delegate
to the commands below.
"""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from gitcredentials.build import build as run_build
from gitcredentials.config.metadata import read_metadata
from gitcredentials.detect import detect as run_detect
from gitcredentials.exceptions import GitCredentialsError
from gitcredentials.lifecycle import BuildContext, BuildpackInfo, DetectContext
from gitcredentials.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)

# Lifecycle exit code for "detection failed, do not run build"
DETECT_FAIL_EXIT_CODE = 100


def _buildpack_info(cnb_path: Path) -> BuildpackInfo:
    table = read_metadata(cnb_path).buildpack
    return BuildpackInfo(id=table.id, name=table.name, version=table.version)


@click.group()
@click.option(
    "--log-level",
    default="INFO",
    envvar="GIT_CREDENTIALS_LOG_LEVEL",
    help="Logging level",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(log_level: str, json_logs: bool) -> None:
    """gitcredentials: provision git credentials into a buildpack build."""
    configure_logging(log_level, json_logs=json_logs)


@cli.command()
@click.argument("platform_dir", type=click.Path(path_type=Path))
@click.argument("plan_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--buildpack-dir",
    envvar="CNB_BUILDPACK_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Buildpack directory containing buildpack.toml",
)
@click.option(
    "--app-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    help="Application directory containing buildpack.yml",
)
def detect(
    platform_dir: Path,
    plan_path: Path,
    buildpack_dir: Path | None,
    app_dir: Path,
) -> None:
    """Decide whether credentials are available and write the build plan."""
    try:
        info = _buildpack_info(buildpack_dir) if buildpack_dir else BuildpackInfo()
        result = run_detect(
            DetectContext(working_dir=app_dir, cnb_path=buildpack_dir, buildpack_info=info)
        )
    except GitCredentialsError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("detect_error", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error("detect_unexpected", exc_info=True)
        sys.exit(1)

    if result.plan is None:
        sys.exit(DETECT_FAIL_EXIT_CODE)

    plan_path.write_text(result.plan.to_toml())


@cli.command()
@click.argument("layers_dir", type=click.Path(file_okay=False, path_type=Path))
@click.argument("platform_dir", type=click.Path(path_type=Path))
@click.argument("plan_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--buildpack-dir",
    envvar="CNB_BUILDPACK_DIR",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Buildpack directory containing buildpack.toml",
)
@click.option(
    "--app-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    help="Application directory containing buildpack.yml",
)
def build(
    layers_dir: Path,
    platform_dir: Path,
    plan_path: Path,
    buildpack_dir: Path,
    app_dir: Path,
) -> None:
    """Provision the resolved credentials into git."""
    try:
        context = BuildContext(
            working_dir=app_dir,
            cnb_path=buildpack_dir,
            layers_dir=layers_dir,
            buildpack_info=_buildpack_info(buildpack_dir),
        )
        result = asyncio.run(run_build(context))
        result.write(layers_dir)
    except GitCredentialsError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("build_error", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error("build_unexpected", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
