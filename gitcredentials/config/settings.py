"""Environment-driven settings.

The build environment passes a credential through ``GIT_CREDENTIALS_*``
variables. Unset variables read as empty strings so callers can apply the
buildpack defaults uniformly.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentCredentialSettings(BaseSettings):
    """Credential fields read from ``GIT_CREDENTIALS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_CREDENTIALS_",
        case_sensitive=False,
        extra="ignore",
    )

    username: str = Field(default="", description="GIT_CREDENTIALS_USERNAME")
    password: str = Field(default="", description="GIT_CREDENTIALS_PASSWORD")
    protocol: str = Field(default="", description="GIT_CREDENTIALS_PROTOCOL")
    host: str = Field(default="", description="GIT_CREDENTIALS_HOST")
    path: str = Field(default="", description="GIT_CREDENTIALS_PATH")
    url: str = Field(default="", description="GIT_CREDENTIALS_URL")

    @property
    def has_login(self) -> bool:
        """Both username and password are present and non-empty."""
        return bool(self.username) and bool(self.password)
