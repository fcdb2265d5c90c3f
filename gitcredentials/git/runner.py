"""Logged execution of git commands.

GitCommandRunner is the only place that launches git. It logs the command,
its outcome and any captured output, and lets the structured errors from
gitcredentials.utils.async_subprocess propagate unchanged.
"""

import shlex
from dataclasses import dataclass
from pathlib import Path

import structlog

from gitcredentials.exceptions import CommandError
from gitcredentials.utils.async_subprocess import run_command, run_command_with_input

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a successful command."""

    stdout: str
    stderr: str
    returncode: int = 0


class GitCommandRunner:
    """Run git subcommands, logging each invocation.

    Attributes:
        executable: Name or path of the git binary
        cwd: Working directory for every command, None for the current one

    Example:
        >>> runner = GitCommandRunner()
        >>> await runner.run("config", "--global", "credential.helper", "cache")
    """

    def __init__(self, executable: str = "git", cwd: Path | str | None = None) -> None:
        self.executable = executable
        self.cwd = cwd

    def _argv(self, args: tuple[str, ...]) -> tuple[str, ...]:
        return (self.executable, *args)

    async def run(self, *args: str, check: bool = True) -> CommandResult:
        """Run ``git <args>`` and return its captured output.

        Raises:
            ExecutableNotFoundError: If git is not on PATH
            CommandError: If git cannot be started or (check=True) exits non-zero
        """
        argv = self._argv(args)
        log.info("running_command", command=shlex.join(argv))

        try:
            stdout, stderr, returncode = await run_command(*argv, cwd=self.cwd, check=check)
        except CommandError as e:
            self._log_failure(e)
            raise

        if returncode != 0:
            log.info("command_exited", command=shlex.join(argv), returncode=returncode)
            return CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)

        log.info("command_succeeded", command=shlex.join(argv))
        if stdout:
            log.debug("command_output", output=stdout.rstrip())
        return CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)

    async def run_with_input(self, *args: str, input_text: str) -> CommandResult:
        """Run ``git <args>`` feeding ``input_text`` on stdin.

        ``input_text`` may contain secrets and is never logged.

        Raises:
            ExecutableNotFoundError: If git is not on PATH
            CommandError: If git exits non-zero or its stdin pipe breaks
        """
        argv = self._argv(args)
        log.info("running_command", command=shlex.join(argv))

        try:
            stdout, stderr, returncode = await run_command_with_input(
                *argv, input_text=input_text, cwd=self.cwd
            )
        except CommandError as e:
            self._log_failure(e)
            raise

        log.info("command_succeeded", command=shlex.join(argv))
        if stdout:
            log.debug("command_output", output=stdout.rstrip())
        if stderr:
            log.debug("command_stderr", stderr=stderr.rstrip())
        return CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)

    @staticmethod
    def _log_failure(error: CommandError) -> None:
        log.error(
            "command_failed",
            command=shlex.join(error.command),
            returncode=error.returncode,
            stderr=error.stderr.rstrip() or None,
            error=error.message,
        )
