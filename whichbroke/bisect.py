"""Main orchestration: locate the repository, read history, search, report."""

import os
from typing import Optional, Sequence

from .colors import Colors
from .errors import WhichbrokeError
from .locator import locate
from .logging_setup import setup_logging
from .probe import BuildProbe
from .search import find_last_passing
from .state import SearchLog


class BisectRunner:
    """Run one search for the last passing commit.

    This class wires the pieces together:
    - Locating the repository from a start directory
    - Reading the commit history
    - Driving the search with a checkout + build probe
    - Mapping errors to exit codes and reporting the result
    """

    def __init__(
        self,
        build_cmd: str,
        build_args: Sequence[str] = (),
        start_dir: Optional[str] = None,
        dry_run: bool = False,
        verbose: bool = False,
    ):
        """Initialize the runner.

        Args:
            build_cmd: Build/test command run for every probed commit.
            build_args: Arguments passed to the build command.
            start_dir: Directory to start the repository search from
                (default: current directory).
            dry_run: If True, report what would be searched without building.
            verbose: If True, enable verbose logging.
        """
        self.logger = setup_logging(verbose)
        self.verbose = verbose
        self.build_cmd = build_cmd
        self.build_args = list(build_args)
        self.start_dir = start_dir
        self.dry_run = dry_run
        self.log = SearchLog()
        self.result: Optional[str] = None

    def search(self) -> Optional[str]:
        """Locate the repository and find the last passing commit.

        Returns:
            Identifier of the newest commit that still passes, or None in
            dry run mode.

        Raises:
            WhichbrokeError: On any failure; see the exit_code attribute.
        """
        start_dir = self.start_dir or os.getcwd()
        repo = locate(start_dir, logger=self.logger)
        self.logger.info(f"Using {repo.describe()}")

        history = repo.history()
        self.logger.info(f"Found {len(history)} commits/revisions")

        if self.dry_run:
            if history:
                self.logger.info(f"Newest: {history[0]}")
                self.logger.info(f"Oldest: {history[-1]}")
            self.logger.info(f"Build command: {' '.join([self.build_cmd] + self.build_args)}")
            return None

        probe = BuildProbe(
            repo, history, self.build_cmd, self.build_args,
            log=self.log, logger=self.logger,
        )
        index = find_last_passing(history, probe, logger=self.logger)
        self.result = history[index]
        return self.result

    def print_summary(self):
        """Log how many probes the search took."""
        self.logger.info(
            f"Tested {len(self.log.steps)} commits "
            f"({self.log.count('pass')} passing, {self.log.count('fail')} failing) "
            f"in {self.log.get_total_duration():.1f}s"
        )

    def run(self) -> int:
        """Main entry point.

        Returns:
            Process exit code: 0 on success, otherwise the exit_code of the
            error that stopped the search.
        """
        try:
            commit = self.search()
        except KeyboardInterrupt:
            self.logger.warning("Search interrupted by user")
            return 130
        except WhichbrokeError as e:
            self.logger.error(str(e))
            return e.exit_code
        except OSError as e:
            self.logger.error(f"can't read the start directory: {e}")
            return 1

        if self.dry_run:
            self.logger.info(f"{Colors.YELLOW}Dry run mode - no commits were built{Colors.RESET}")
            return 0

        self.print_summary()
        print(f"the last passing commit/revision is: {commit}", flush=True)
        return 0
