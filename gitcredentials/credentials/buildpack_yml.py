"""Parser for the per-build ``buildpack.yml``.

Applications declare credentials under the ``gitcredentials`` key::

    gitcredentials:
      credentials:
        - protocol: https
          host: example.com
          path: /foo.git
          username: username
          password: password
          url: https://example.com

A missing file, an empty document, or a document without the
``gitcredentials`` key declares no credentials.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gitcredentials.credentials.models import Credential
from gitcredentials.exceptions import BuildpackYMLError

log = structlog.get_logger(__name__)

BUILDPACK_YML = "buildpack.yml"
SECTION_KEY = "gitcredentials"


class GitCredentialsSection(BaseModel):
    """The ``gitcredentials`` mapping."""

    model_config = ConfigDict(extra="ignore")

    credentials: list[Credential] = Field(default_factory=list)

    @field_validator("credentials", mode="before")
    @classmethod
    def empty_for_null(cls, v: Any) -> Any:
        """``credentials:`` with no list declares nothing."""
        return [] if v is None else v


class BuildpackYML(BaseModel):
    """Recognized parts of buildpack.yml."""

    model_config = ConfigDict(extra="ignore")

    gitcredentials: GitCredentialsSection = Field(default_factory=GitCredentialsSection)

    @property
    def credentials(self) -> list[Credential]:
        return self.gitcredentials.credentials


def load_buildpack_yml(path: Path | str) -> BuildpackYML:
    """Load buildpack.yml, returning an empty document when it does not exist.

    Raises:
        BuildpackYMLError: If the file is not valid YAML, is not a mapping,
            or has a wrongly shaped ``gitcredentials`` section
    """
    yml_path = Path(path)
    try:
        with open(yml_path) as f:
            content = f.read()
    except FileNotFoundError:
        log.debug("buildpack_yml_absent", path=str(yml_path))
        return BuildpackYML()
    except OSError as e:
        raise BuildpackYMLError(yml_path, f"cannot read file: {e.strerror or e}") from e

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise BuildpackYMLError(yml_path, str(e)) from e

    if document is None:
        return BuildpackYML()
    if not isinstance(document, dict):
        raise BuildpackYMLError(yml_path, "document must be a YAML mapping")
    if document.get(SECTION_KEY) is None:
        return BuildpackYML()

    try:
        return BuildpackYML.model_validate(document)
    except ValidationError as e:
        raise BuildpackYMLError(yml_path, str(e)) from e


def parse_buildpack_yml(path: Path | str) -> list[Credential]:
    """Return the credentials declared in buildpack.yml, in file order.

    Declared credentials are returned as-is; entries with an empty username
    or password are kept.
    """
    credentials = load_buildpack_yml(path).credentials
    if credentials:
        log.debug("buildpack_yml_credentials", path=str(path), count=len(credentials))
    return credentials
