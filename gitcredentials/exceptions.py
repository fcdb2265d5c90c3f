"""Custom exception hierarchy for the gitcredentials buildpack.

Every failure in the detect and build phases is raised as a subclass of
GitCredentialsError so the CLI can report it with a single except clause.

Exception Hierarchy:
    GitCredentialsError (base)
    ├── ConfigurationError
    │   ├── MetadataReadError
    │   └── MetadataParseError
    ├── BuildpackYMLError
    ├── CredentialError
    │   └── NoCredentialsError
    └── CommandError
        └── ExecutableNotFoundError

Example Usage:
    >>> from gitcredentials.exceptions import MetadataReadError
    >>> try:
    ...     read_configuration(cnb_path)
    ... except OSError as e:
    ...     raise MetadataReadError(path, e.strerror) from e
"""

from collections.abc import Sequence
from pathlib import Path


class GitCredentialsError(Exception):
    """Base exception for all gitcredentials errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(GitCredentialsError):
    """Buildpack metadata could not be loaded.

    Raised while reading the ``[metadata.configuration]`` table of
    ``buildpack.toml``.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: Path of the metadata document that failed
        """
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class MetadataReadError(ConfigurationError):
    """buildpack.toml is missing or unreadable."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        message = f"Cannot open buildpack metadata {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)


class MetadataParseError(ConfigurationError):
    """buildpack.toml is not valid TOML or has a wrongly typed table."""

    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid buildpack metadata {path}: {detail}", path=path)


class BuildpackYMLError(GitCredentialsError):
    """The per-build buildpack.yml is malformed.

    Attributes:
        path: Location of the offending file
        detail: Diagnostic from the YAML decoder or the schema validation
    """

    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Invalid buildpack.yml {path}: {detail}")


class CredentialError(GitCredentialsError):
    """Credential resolution errors."""

    pass


class NoCredentialsError(CredentialError):
    """Neither the environment nor buildpack.yml yielded a credential."""

    def __init__(self) -> None:
        super().__init__(
            "No credentials were specified either in environment variables or in the buildpack.yml"
        )


class CommandError(GitCredentialsError):
    """An external command failed to launch, exited non-zero, or broke its stdin pipe.

    Attributes:
        command: Argument vector that was executed
        returncode: Exit status, or None when the process never ran to completion
        stdout: Captured standard output
        stderr: Captured standard error, appended to the message when present
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            command: Argument vector that was executed
            returncode: Process exit status if known
            stdout: Captured standard output
            stderr: Captured standard error
        """
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

        full_message = message
        if stderr.strip():
            full_message = f"{message}\nstderr: {stderr.strip()}"

        super().__init__(full_message)
        self.message = message


class ExecutableNotFoundError(CommandError):
    """The executable is not locatable on the search path."""

    def __init__(self, executable: str, command: Sequence[str] = ()) -> None:
        self.executable = executable
        super().__init__(
            f'executable "{executable}" not found in PATH',
            command=command or (executable,),
        )
