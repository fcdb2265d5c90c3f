"""Tests for credential resolution from the environment and buildpack.yml."""

from pathlib import Path

import pytest

from gitcredentials.config import BuildpackConfiguration, EnvironmentCredentialSettings
from gitcredentials.credentials import (
    BuildpackYMLError,
    Credential,
    CredentialResolver,
    NoCredentialsError,
    resolve_from_environment,
)

DEFAULTS = BuildpackConfiguration(
    default_timeout="3600",
    default_protocol="https",
    default_host="github.com",
    default_path="/",
)


def write_yml(working_dir: Path, body: str) -> None:
    (working_dir / "buildpack.yml").write_text(body)


TWO_CREDENTIALS_YML = """gitcredentials:
  credentials:
    - protocol: https
      host: a.example
      username: alice
      password: pa
    - protocol: https
      host: b.example
      username: bob
      password: pb
"""


class TestResolveFromEnvironment:
    """GIT_CREDENTIALS_* variables."""

    def test_no_variables_yields_nothing(self):
        assert resolve_from_environment(DEFAULTS) is None

    @pytest.mark.parametrize(
        ("username", "password"),
        [("user", ""), ("", "pass"), ("", "")],
    )
    def test_incomplete_login_yields_nothing(self, monkeypatch, username, password):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", username)
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", password)

        assert resolve_from_environment(DEFAULTS) is None

    def test_only_username_set_yields_nothing(self, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "user")

        assert resolve_from_environment(DEFAULTS) is None

    def test_fills_from_configuration_defaults(self, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")

        credential = resolve_from_environment(DEFAULTS)

        assert credential == Credential(
            protocol="https",
            host="github.com",
            path="/",
            url="",
            username="testuser",
            password="testpass",
        )

    def test_environment_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")
        monkeypatch.setenv("GIT_CREDENTIALS_PROTOCOL", "testprotocol")
        monkeypatch.setenv("GIT_CREDENTIALS_HOST", "testhost.com")
        monkeypatch.setenv("GIT_CREDENTIALS_PATH", "/testpath/")
        monkeypatch.setenv("GIT_CREDENTIALS_URL", "https://newexample.com")

        credential = resolve_from_environment(DEFAULTS)

        assert credential is not None
        assert credential.protocol == "testprotocol"
        assert credential.host == "testhost.com"
        assert credential.path == "/testpath/"
        assert credential.url == "https://newexample.com"
        assert credential.effective_url == "https://newexample.com/testpath/"

    def test_empty_override_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")
        monkeypatch.setenv("GIT_CREDENTIALS_HOST", "")

        credential = resolve_from_environment(DEFAULTS)

        assert credential is not None
        assert credential.host == "github.com"

    def test_accepts_injected_settings(self):
        settings = EnvironmentCredentialSettings(username="u", password="p", host="git.example")

        credential = resolve_from_environment(BuildpackConfiguration(), settings)

        assert credential == Credential(host="git.example", username="u", password="p")


class TestCredentialResolver:
    """Combined resolution."""

    def test_no_sources_raises(self, working_dir):
        with pytest.raises(NoCredentialsError, match="No credentials were specified"):
            CredentialResolver(DEFAULTS).resolve(working_dir)

    def test_incomplete_environment_and_no_file_raises(self, working_dir, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "user")

        with pytest.raises(NoCredentialsError):
            CredentialResolver(DEFAULTS).resolve(working_dir)

    def test_section_without_credentials_raises(self, working_dir):
        write_yml(working_dir, "gitcredentials:\n  credentials: []\n")

        with pytest.raises(NoCredentialsError):
            CredentialResolver(DEFAULTS).resolve(working_dir)

    def test_environment_only(self, working_dir, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")

        credentials = CredentialResolver(DEFAULTS).resolve(working_dir)

        assert len(credentials) == 1
        assert credentials[0].effective_url == "https://github.com/"

    def test_file_only(self, working_dir):
        write_yml(working_dir, TWO_CREDENTIALS_YML)

        credentials = CredentialResolver(DEFAULTS).resolve(working_dir)

        assert [c.username for c in credentials] == ["alice", "bob"]

    def test_file_credentials_precede_environment(self, working_dir, monkeypatch):
        write_yml(working_dir, TWO_CREDENTIALS_YML)
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "eve")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "pe")

        credentials = CredentialResolver(DEFAULTS).resolve(working_dir)

        assert [c.username for c in credentials] == ["alice", "bob", "eve"]

    def test_file_credentials_are_not_filtered(self, working_dir):
        write_yml(
            working_dir,
            "gitcredentials:\n  credentials:\n    - host: example.com\n      username: ''\n",
        )

        credentials = CredentialResolver(DEFAULTS).resolve(working_dir)

        assert credentials == [Credential(host="example.com")]

    def test_malformed_file_raises_parse_error(self, working_dir, monkeypatch):
        write_yml(working_dir, "gitcredentials: [unclosed\n")
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")

        with pytest.raises(BuildpackYMLError):
            CredentialResolver(DEFAULTS).resolve(working_dir)

    def test_defaults_to_empty_configuration(self, working_dir, monkeypatch):
        monkeypatch.setenv("GIT_CREDENTIALS_USERNAME", "testuser")
        monkeypatch.setenv("GIT_CREDENTIALS_PASSWORD", "testpass")

        credentials = CredentialResolver().resolve(working_dir)

        assert credentials == [Credential(username="testuser", password="testpass")]
