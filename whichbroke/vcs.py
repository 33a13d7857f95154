"""Version control backends behind one history/checkout/build contract."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import (
    BuildInfraFailure,
    CheckoutFailure,
    CommandError,
    CommandStartError,
    LogFailure,
)
from .runner import run_command

# One capture group per log entry, newest entry first in the log output.
GIT_COMMIT_RE = re.compile(r"^commit ([0-9a-fA-F]{40})$", re.MULTILINE)
HG_CHANGESET_RE = re.compile(r"^changeset:\s*(.*:.*)$", re.MULTILINE)
BZR_REVNO_RE = re.compile(r"^revno: (.*)$", re.MULTILINE)


@dataclass(frozen=True)
class Backend:
    """Commands and parsing rules for one version control tool."""
    name: str
    executable: str
    marker: str
    log_args: Tuple[str, ...]
    revision_re: re.Pattern
    checkout_args: Tuple[str, ...]

    def checkout_command(self, commit: str) -> List[str]:
        """Arguments that bring the working tree to ``commit``."""
        return list(self.checkout_args) + [commit]


GIT = Backend(
    name="git",
    executable="git",
    marker=".git",
    log_args=("log", "--no-decorate", "--no-color"),
    revision_re=GIT_COMMIT_RE,
    checkout_args=("checkout",),
)

MERCURIAL = Backend(
    name="hg",
    executable="hg",
    marker=".hg",
    log_args=("log",),
    revision_re=HG_CHANGESET_RE,
    checkout_args=("revert", "--all", "-r"),
)

BAZAAR = Backend(
    name="bzr",
    executable="bzr",
    marker=".bzr",
    log_args=("log",),
    revision_re=BZR_REVNO_RE,
    checkout_args=("revert", "-r"),
)

# Priority order when a directory holds more than one marker.
BACKENDS = (GIT, MERCURIAL, BAZAAR)


def extract_revisions(text: str, pattern: re.Pattern) -> List[str]:
    """Return the first group of every match of ``pattern`` in document order.

    Entries that don't match are skipped.
    """
    return [match.group(1) for match in pattern.finditer(text)]


class Repository:
    """A working copy managed by one of the supported backends."""

    def __init__(self, backend: Backend, path: str, logger: Optional[logging.Logger] = None):
        """Initialize the repository.

        Args:
            backend: Backend that owns the working copy.
            path: Root directory of the working copy.
            logger: Optional logger instance. If not provided, uses module logger.
        """
        self.backend = backend
        self.path = path
        self.logger = logger or logging.getLogger("whichbroke")

    def __repr__(self):
        return f"Repository({self.backend.name!r}, {self.path!r})"

    def describe(self) -> str:
        return f"{self.backend.name} repository at {self.path}"

    def _run_vcs(self, args: Sequence[str]) -> str:
        return run_command(self.backend.executable, args, self.path, self.logger).stdout

    def history(self) -> List[str]:
        """Get the commit history, newest first.

        Returns:
            List of commit identifiers. Empty if the log has no entries.

        Raises:
            LogFailure: If the log command can't be run or fails.
        """
        try:
            output = self._run_vcs(self.backend.log_args)
        except CommandError as e:
            raise LogFailure(f"error reading the commit log: {e}") from e

        commits = extract_revisions(output, self.backend.revision_re)
        self.logger.debug(f"Found {len(commits)} commits in {self.describe()}")
        return commits

    def checkout(self, commit: str):
        """Bring the working tree to a specific commit.

        Raises:
            CheckoutFailure: If the checkout command can't be run or fails.
        """
        try:
            self._run_vcs(self.backend.checkout_command(commit))
        except CommandError as e:
            raise CheckoutFailure(f"error checking out {commit}: {e}") from e

    def build(self, build_cmd: str, build_args: Sequence[str]) -> str:
        """Run the build command in the working tree.

        Returns:
            Captured stdout of the build.

        Raises:
            CommandExitError: If the build ran and failed. This is a verdict,
                not an infrastructure problem.
            BuildInfraFailure: If the build command could not be run.
        """
        try:
            return run_command(build_cmd, build_args, self.path, self.logger).stdout
        except CommandStartError as e:
            raise BuildInfraFailure(f"error running the build: {e}") from e
