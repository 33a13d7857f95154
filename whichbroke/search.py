"""Search for the newest commit that still passes.

The history is ordered newest first. The search runs in three phases:

1. Scan from the newest commit until one fails. This is linear on purpose:
   the tool is meant to be started on a broken tree, so the first failure is
   usually found at index 0.
2. Probe ``first_failing + 1, + 2, + 4, ...`` (clamped to the oldest commit)
   until one passes.
3. Bisect between the last failing probe and the passing one.

Only PASS and FAIL verdicts drive the search. A tester that cannot produce a
verdict raises, and the exception aborts the whole search unchanged.
"""

import enum
import logging
from typing import Callable, Optional, Sequence

from .errors import NoFailingRevisionError, NoPassingRevisionError


class Verdict(enum.Enum):
    """Outcome of building one commit."""
    PASS = "pass"
    FAIL = "fail"


def find_last_passing(
    history: Sequence[str],
    test: Callable[[int], Verdict],
    logger: Optional[logging.Logger] = None,
) -> int:
    """Find the index of the newest passing commit older than a failing one.

    Args:
        history: Commit identifiers, newest first.
        test: Called with an index into ``history``; returns its verdict.
        logger: Optional logger instance. If not provided, uses module logger.

    Returns:
        Index ``i`` such that ``history[i]`` passes and ``history[i - 1]``
        fails.

    Raises:
        NoFailingRevisionError: If every commit passes (or history is empty).
        NoPassingRevisionError: If every commit from the first failure down
            to the oldest one fails.
    """
    logger = logger or logging.getLogger("whichbroke")
    oldest = len(history) - 1

    failing = None
    for idx in range(len(history)):
        if test(idx) is Verdict.FAIL:
            failing = idx
            break
    if failing is None:
        raise NoFailingRevisionError()
    logger.debug(f"First failing commit at index {failing}: {history[failing]}")

    # lo always indexes a failing commit, hi a passing one.
    lo = failing
    step = 1
    while True:
        hi = min(failing + step, oldest)
        if hi == lo:
            raise NoPassingRevisionError(history[failing])
        if test(hi) is Verdict.PASS:
            break
        lo = hi
        step *= 2
    logger.debug(f"Passing commit at index {hi}, bisecting indices {lo}..{hi}")

    while hi - lo > 1:
        mid = lo + (hi - lo) // 2
        if test(mid) is Verdict.PASS:
            hi = mid
        else:
            lo = mid
        logger.debug(f"Window is now {lo}..{hi}")

    return hi
