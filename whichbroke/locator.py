"""Find the repository that owns a directory."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .errors import NotFoundError
from .vcs import BACKENDS, Backend, Repository


def find_marker(directory: Path, backends: Sequence[Backend] = BACKENDS) -> Optional[Backend]:
    """Return the first backend whose marker directory exists in ``directory``."""
    for backend in backends:
        if (directory / backend.marker).is_dir():
            return backend
    return None


def locate(
    start_dir: Union[str, Path],
    backends: Sequence[Backend] = BACKENDS,
    logger: Optional[logging.Logger] = None,
) -> Repository:
    """Walk from ``start_dir`` up to the filesystem root looking for a repository.

    Symlinks are resolved before walking, so the walk visits each ancestor
    once and is bounded by the depth of the resolved path.

    Args:
        start_dir: Directory to start searching from.
        backends: Backends to try, in priority order.
        logger: Optional logger instance. If not provided, uses module logger.

    Returns:
        Repository bound to the first directory holding a marker.

    Raises:
        NotFoundError: If the root is reached without a match.
    """
    logger = logger or logging.getLogger("whichbroke")
    current = Path(start_dir).resolve()

    for _ in range(len(current.parts)):
        logger.debug(f"Looking for a repository in {current}")
        backend = find_marker(current, backends)
        if backend is not None:
            logger.debug(f"Found {backend.name} marker in {current}")
            return Repository(backend, str(current), logger)
        parent = current.parent
        if parent == current:
            break
        current = parent

    raise NotFoundError(str(start_dir))
