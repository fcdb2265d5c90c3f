"""Pytest configuration and shared fixtures."""

import stat
from pathlib import Path

import pytest

from gitcredentials.credentials.models import Credential

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENV_VARS = (
    "GIT_CREDENTIALS_USERNAME",
    "GIT_CREDENTIALS_PASSWORD",
    "GIT_CREDENTIALS_PROTOCOL",
    "GIT_CREDENTIALS_HOST",
    "GIT_CREDENTIALS_PATH",
    "GIT_CREDENTIALS_URL",
)


class InMemoryGitConfig:
    """GitConfigStore that keeps values in a dict and records every write."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.writes: list[tuple[str, str]] = []

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


class RecordingCredentialCache:
    """CredentialCache that records approved credentials in order."""

    def __init__(self) -> None:
        self.approved: list[Credential] = []

    async def approve(self, credential: Credential) -> None:
        self.approved.append(credential)


@pytest.fixture(autouse=True)
def clean_git_credentials_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GIT_CREDENTIALS_* variables from the host out of every test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_store() -> InMemoryGitConfig:
    """In-memory global git config."""
    return InMemoryGitConfig()


@pytest.fixture
def credential_cache() -> RecordingCredentialCache:
    """Credential cache that only records approvals."""
    return RecordingCredentialCache()


@pytest.fixture
def cnb_dir(tmp_path: Path) -> Path:
    """Buildpack directory holding the sample buildpack.toml."""
    path = tmp_path / "cnb"
    path.mkdir()
    (path / "buildpack.toml").write_text((FIXTURES_DIR / "some_buildpack.toml").read_text())
    return path


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Empty application directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def sample_credential() -> Credential:
    """Credential as declared in the sample buildpack.yml."""
    return Credential(
        protocol="https",
        host="example.com",
        path="/foo.git",
        username="username",
        password="password",
        url="https://example.com",
    )


@pytest.fixture
def fake_git(tmp_path: Path) -> Path:
    """Shell script standing in for git.

    Appends its arguments to ``calls.log`` and, for ``credential approve``,
    copies stdin to ``approve.input``. ``config --get user.name`` prints
    ``tester``; any other ``--get`` exits 1 like git does for a missing key.
    ``config --global fail.key ...`` exits 2 with a message on stderr.
    """
    bin_dir = tmp_path / "fakebin"
    bin_dir.mkdir()
    script = bin_dir / "git"
    script.write_text(
        f"""#!/bin/sh
echo "$@" >> "{bin_dir}/calls.log"
if [ "$1" = "credential" ]; then
    cat > "{bin_dir}/approve.input"
    echo "approved"
    exit 0
fi
if [ "$3" = "--get" ]; then
    if [ "$4" = "user.name" ]; then
        echo "tester"
        exit 0
    fi
    exit 1
fi
if [ "$4" = "fail.key" ]; then
    echo "error: could not lock config file" >&2
    exit 2
fi
exit 0
"""
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script
