"""Error types raised by whichbroke.

Every error carries the process exit code the CLI reports for it, so that
scripts wrapping the tool can tell causes apart without parsing text.
"""

from typing import Optional, Sequence


class WhichbrokeError(Exception):
    """Base class for all tool errors."""
    exit_code = 1


class CommandError(WhichbrokeError):
    """An external command did not complete successfully."""

    def __init__(self, cmd: Sequence[str], message: str):
        self.cmd = list(cmd)
        super().__init__(f"{' '.join(self.cmd)}: {message}")


class CommandExitError(CommandError):
    """The command ran and exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: Optional[str] = None):
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"exited with status {returncode}"
        if self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        super().__init__(cmd, message)


class CommandStartError(CommandError):
    """The command could not be started at all."""

    def __init__(self, cmd: Sequence[str], reason: str):
        self.reason = reason
        super().__init__(cmd, f"could not be run: {reason}")


class NotFoundError(WhichbrokeError):
    """No repository marker in the start directory or any of its parents."""
    exit_code = 3

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"no repository found: {path}")


class LogFailure(WhichbrokeError):
    """The commit history could not be read."""
    exit_code = 4


class CheckoutFailure(WhichbrokeError):
    """A revision could not be checked out."""
    exit_code = 5


class BuildInfraFailure(WhichbrokeError):
    """The build command could not be executed (not a build verdict)."""
    exit_code = 5


class NoFailingRevisionError(WhichbrokeError):
    """Every commit in the history builds."""
    exit_code = 6

    def __init__(self):
        super().__init__("can't find a non passing commit/revision")


class NoPassingRevisionError(WhichbrokeError):
    """No commit older than the first failure builds."""
    exit_code = 7

    def __init__(self, commit: str):
        self.commit = commit
        super().__init__(f"can't find a passing commit/revision before {commit}")
