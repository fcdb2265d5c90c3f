"""Types exchanged with the buildpack lifecycle.

The lifecycle runs ``bin/detect`` and ``bin/build`` and reads back a build
plan and layer metadata as TOML. These dataclasses carry that boundary
data; ``to_toml`` renders the small fixed documents the lifecycle expects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PLAN_ENTRY_NAME = "gitcredentials"
LAYER_NAME = "gitcredentials"

# Layer metadata is written with the [types] table introduced in this API
BUILDPACK_API = "0.6"


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _toml_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class BuildpackInfo:
    """Identity of the running buildpack, from buildpack.toml."""

    id: str = ""
    name: str = ""
    version: str = ""

    @property
    def title(self) -> str:
        return f"{self.name} {self.version}".strip()


@dataclass(frozen=True)
class BuildPlan:
    """Names this buildpack provides and requires."""

    provides: tuple[str, ...] = ()
    requires: tuple[str, ...] = ()

    def to_toml(self) -> str:
        sections = [f"[[provides]]\nname = {_toml_string(name)}\n" for name in self.provides]
        sections += [f"[[requires]]\nname = {_toml_string(name)}\n" for name in self.requires]
        return "\n".join(sections)


@dataclass(frozen=True)
class DetectContext:
    """Inputs to the participation check.

    Attributes:
        working_dir: Application source directory (holds buildpack.yml)
        cnb_path: Buildpack directory (holds buildpack.toml); None skips
            reading the buildpack defaults
        buildpack_info: Identity used for the title line
    """

    working_dir: Path
    cnb_path: Path | None = None
    buildpack_info: BuildpackInfo = field(default_factory=BuildpackInfo)


@dataclass(frozen=True)
class DetectResult:
    """Outcome of the participation check.

    Attributes:
        plan: Build plan to advertise, None when declining
        reason: Why the buildpack declined, None when participating
    """

    plan: BuildPlan | None = None
    reason: str | None = None

    @property
    def participates(self) -> bool:
        return self.plan is not None


@dataclass(frozen=True)
class BuildContext:
    """Inputs to the provisioning phase."""

    working_dir: Path
    cnb_path: Path
    layers_dir: Path
    buildpack_info: BuildpackInfo = field(default_factory=BuildpackInfo)


@dataclass(frozen=True)
class Layer:
    """A layer registered with the lifecycle.

    The credentials layer only records that provisioning happened, so all
    of its flags default to off. Flags are rendered under ``[types]``, the
    layer format of buildpack API 0.6 and later.
    """

    name: str
    path: Path
    build: bool = False
    cache: bool = False
    launch: bool = False

    def to_toml(self) -> str:
        return (
            "[types]\n"
            f"build = {_toml_bool(self.build)}\n"
            f"cache = {_toml_bool(self.cache)}\n"
            f"launch = {_toml_bool(self.launch)}\n"
        )


@dataclass(frozen=True)
class BuildResult:
    """Layers produced by the provisioning phase."""

    layers: tuple[Layer, ...] = ()

    def write(self, layers_dir: Path) -> None:
        """Write ``<layers_dir>/<name>.toml`` and the layer directory for each layer."""
        for layer in self.layers:
            layer.path.mkdir(parents=True, exist_ok=True)
            (layers_dir / f"{layer.name}.toml").write_text(layer.to_toml())
