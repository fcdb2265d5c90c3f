"""Async subprocess utilities.

Provides the two process primitives the provisioning engine needs:

    - run_command: Execute a command with list arguments and capture
      stdout and stderr separately.
    - run_command_with_input: Same, but feed text to the command's stdin
      while its output streams are drained.

Both functions raise structured errors from gitcredentials.exceptions
instead of returning a failing exit status:

    - ExecutableNotFoundError: The executable is not on PATH.
    - CommandError: Launch failure, non-zero exit (with the captured
      stderr embedded), or a broken stdin pipe.

Example:
    >>> from gitcredentials.utils.async_subprocess import run_command
    >>> stdout, stderr, code = await run_command("git", "config", "--global", "--list")

Deadlocks:
    ``run_command_with_input`` writes stdin in its own coroutine and reads
    stdout and stderr in two more, all joined with ``asyncio.gather``. A
    child that fills an output pipe before it finishes reading its input
    therefore cannot block the writer.
"""

import asyncio
from collections.abc import Sequence
from pathlib import Path

from gitcredentials.exceptions import CommandError, ExecutableNotFoundError


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


async def _spawn(
    args: Sequence[str],
    cwd: Path | str | None,
    with_stdin: bool,
) -> asyncio.subprocess.Process:
    """Start a process with piped output, mapping launch failures."""
    try:
        return await asyncio.create_subprocess_exec(
            *args,
            cwd=cwd,
            stdin=asyncio.subprocess.PIPE if with_stdin else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise ExecutableNotFoundError(args[0], command=args) from e
    except OSError as e:
        raise CommandError(f"Failed to start {args[0]}: {e}", command=args) from e


def _check_exit(
    args: Sequence[str],
    returncode: int,
    stdout: str,
    stderr: str,
) -> None:
    if returncode != 0:
        raise CommandError(
            f"Command {' '.join(args)} exited with status {returncode}",
            command=args,
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )


async def run_command(
    *args: str,
    cwd: Path | str | None = None,
    check: bool = True,
) -> tuple[str, str, int]:
    """Run a command asynchronously without shell interpolation.

    Args:
        *args: Command and arguments as separate strings, for example
            ``"git", "config", "--global", "credential.helper", "cache"``.
        cwd: Working directory for command execution. If None, uses the
            current working directory of the parent process.
        check: If True (default), raise CommandError when the command
            returns a non-zero exit code.

    Returns:
        Tuple of (stdout, stderr, return_code), decoded as UTF-8 with
        replacement for invalid bytes.

    Raises:
        ExecutableNotFoundError: If the executable is not found.
        CommandError: If the process cannot be started, or check=True and
            it exits non-zero. The captured stderr is part of the message.
    """
    process = await _spawn(args, cwd, with_stdin=False)
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout = _decode(stdout_bytes)
    stderr = _decode(stderr_bytes)
    returncode = process.returncode or 0

    if check:
        _check_exit(args, returncode, stdout, stderr)

    return stdout, stderr, returncode


async def run_command_with_input(
    *args: str,
    input_text: str,
    cwd: Path | str | None = None,
    check: bool = True,
) -> tuple[str, str, int]:
    """Run a command, writing ``input_text`` to its stdin and closing it.

    The stdin writer and both output readers run concurrently and must all
    finish before the exit status is inspected. A write failure (for
    example, the child exited before consuming its input) is reported in
    preference to the exit status.

    Args:
        *args: Command and arguments as separate strings.
        input_text: Text written to the child's stdin before it is closed.
        cwd: Working directory for command execution.
        check: If True (default), raise CommandError on non-zero exit.

    Returns:
        Tuple of (stdout, stderr, return_code).

    Raises:
        ExecutableNotFoundError: If the executable is not found.
        CommandError: On launch failure, broken stdin pipe, or (with
            check=True) non-zero exit.
    """
    process = await _spawn(args, cwd, with_stdin=True)
    assert process.stdin is not None
    assert process.stdout is not None
    assert process.stderr is not None
    stdin = process.stdin

    async def write_input() -> None:
        try:
            stdin.write(input_text.encode("utf-8"))
            await stdin.drain()
        finally:
            stdin.close()
            await stdin.wait_closed()

    write_result, stdout_bytes, stderr_bytes = await asyncio.gather(
        write_input(),
        process.stdout.read(),
        process.stderr.read(),
        return_exceptions=True,
    )
    returncode = await process.wait()

    for stream_result in (stdout_bytes, stderr_bytes):
        if isinstance(stream_result, BaseException):
            raise CommandError(
                f"Failed reading output of {args[0]}: {stream_result}",
                command=args,
                returncode=returncode,
            ) from stream_result

    stdout = _decode(stdout_bytes)  # type: ignore[arg-type]
    stderr = _decode(stderr_bytes)  # type: ignore[arg-type]

    if isinstance(write_result, BaseException):
        raise CommandError(
            f"Failed writing to stdin of {args[0]}: {write_result}",
            command=args,
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        ) from write_result

    if check:
        _check_exit(args, returncode, stdout, stderr)

    return stdout, stderr, returncode
