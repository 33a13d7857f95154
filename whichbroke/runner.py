"""Directory-scoped command execution with logging."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import CommandExitError, CommandStartError


@dataclass
class CommandResult:
    """Captured output of a command that exited cleanly."""
    stdout: str
    stderr: str
    returncode: int = 0


def run_command(
    cmd: str,
    args: Sequence[str],
    cwd: str,
    logger: Optional[logging.Logger] = None,
) -> CommandResult:
    """Run a command in a directory and capture its output.

    Args:
        cmd: Program to run (looked up on PATH).
        args: Arguments passed to the program.
        cwd: Working directory for the process.
        logger: Optional logger instance. If not provided, uses module logger.

    Returns:
        CommandResult with the captured stdout and stderr.

    Raises:
        CommandExitError: If the process ran and exited non-zero.
        CommandStartError: If the process could not be started.
    """
    logger = logger or logging.getLogger("whichbroke")
    argv = [cmd] + list(args)
    logger.debug(f"Running: {' '.join(argv)} (in {cwd})")

    try:
        result = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.debug(f"Command exited with status {e.returncode}")
        raise CommandExitError(argv, e.returncode, e.stderr) from e
    except OSError as e:
        raise CommandStartError(argv, e.strerror or str(e)) from e

    if result.stdout:
        logger.debug(f"stdout: {result.stdout.strip()}")
    return CommandResult(result.stdout, result.stderr, result.returncode)
