"""Credential data model.

A Credential is an immutable value: two credentials with the same fields
are equal and interchangeable.

Example:
    >>> from gitcredentials.credentials.models import Credential
    >>> cred = Credential(
    ...     protocol="https",
    ...     host="example.com",
    ...     path="/foo.git",
    ...     username="ci",
    ...     password="secret",
    ... )
    >>> cred.effective_url
    'https://example.com/foo.git'
    >>> cred.ssh_shorthand
    'git@example.com:'
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

APPROVAL_FIELDS = ("protocol", "host", "path", "username", "password")


class Credential(BaseModel):
    """Username/password credential for one git host or repository.

    Attributes:
        protocol: URL scheme, e.g. "https"
        host: Authority, e.g. "github.com"
        path: Repository path segment; "/" is used when empty
        username: Login name
        password: Password or access token
        url: Full base URL replacing protocol and host when set
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    protocol: str = ""
    host: str = ""
    path: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
    url: str = ""

    @field_validator("protocol", "host", "path", "username", "password", "url", mode="before")
    @classmethod
    def scalar_to_str(cls, v: Any) -> Any:
        """Read YAML scalars as text.

        ``key:`` with no value is an empty string; numbers and booleans
        (``password: 123456``, ``username: 1001``) keep their YAML spelling.
        """
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @property
    def eligible(self) -> bool:
        """Username and password are both non-empty."""
        return bool(self.username) and bool(self.password)

    @property
    def effective_url(self) -> str:
        """Base URL used as the git config key for this credential."""
        base = self.url or f"{self.protocol}://{self.host}"
        return base + (self.path or "/")

    @property
    def ssh_shorthand(self) -> str:
        """SSH-style remote prefix rewritten to the effective URL."""
        return f"git@{self.host}:"

    def approval_input(self) -> str:
        """Render the ``git credential approve`` input for this credential."""
        lines = [f"{name}={getattr(self, name)}" for name in APPROVAL_FIELDS]
        if self.url:
            lines.append(f"url={self.url}")
        return "".join(f"{line}\n" for line in lines)
