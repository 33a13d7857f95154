"""Turn "check out commit, run the build" into a search verdict."""

import logging
import time
from datetime import datetime
from typing import Optional, Sequence

from .colors import Colors
from .errors import CommandExitError, WhichbrokeError
from .search import Verdict
from .state import ProbeStep, SearchLog
from .vcs import Repository


class BuildProbe:
    """Callable test predicate for :func:`whichbroke.search.find_last_passing`.

    ``probe(index)`` checks out ``history[index]`` and runs the build command
    in the working tree. A clean exit is PASS and a non-zero exit is FAIL.
    Checkout failures and builds that can't be started propagate as errors.
    """

    def __init__(
        self,
        repository: Repository,
        history: Sequence[str],
        build_cmd: str,
        build_args: Sequence[str] = (),
        log: Optional[SearchLog] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.repository = repository
        self.history = history
        self.build_cmd = build_cmd
        self.build_args = list(build_args)
        self.log = log if log is not None else SearchLog()
        self.logger = logger or logging.getLogger("whichbroke")

    def __call__(self, index: int) -> Verdict:
        commit = self.history[index]
        self.logger.info(f"Testing commit: {Colors.YELLOW}{commit}{Colors.RESET} ({index + 1}/{len(self.history)})")

        start_time = time.time()
        exit_code = 0
        try:
            self.repository.checkout(commit)
            self.repository.build(self.build_cmd, self.build_args)
            verdict = Verdict.PASS
        except CommandExitError as e:
            exit_code = e.returncode
            verdict = Verdict.FAIL
            if e.stderr.strip():
                self.logger.debug(f"  stderr: {e.stderr.strip()}")
        except WhichbrokeError:
            self._record(commit, "error", None, time.time() - start_time)
            raise
        duration = time.time() - start_time

        color = Colors.GREEN if verdict is Verdict.PASS else Colors.RED
        self.logger.info(
            f"  Result: {color}{verdict.value.upper()}{Colors.RESET} "
            f"(exit code: {exit_code}, duration: {duration:.1f}s)"
        )
        self._record(commit, verdict.value, exit_code, duration)
        return verdict

    def _record(self, commit: str, result: str, exit_code: Optional[int], duration: float):
        self.log.add_step(ProbeStep(
            commit=commit,
            result=result,
            exit_code=exit_code,
            timestamp=datetime.now().isoformat(),
            duration_seconds=duration,
        ))
