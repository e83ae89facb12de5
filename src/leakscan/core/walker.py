"""Deterministic recursive enumeration of the files under a scan root."""

import os
import stat
from typing import Callable, Iterator, Optional

from ..utils.logger import get_logger

logger = get_logger(__name__)

ErrorHandler = Callable[[str, Exception], None]


class WalkError(OSError):
    """Entry the walker refuses to hand to the line scanner."""


def _log_error(path: str, error: Exception) -> None:
    logger.warning(f"Skipping {path}: {error}")


def _check_entry(path: str) -> None:
    """Raise if a non-directory entry cannot be read as a file."""
    st = os.stat(path)  # follows symlinks; dangling links raise here
    if stat.S_ISDIR(st.st_mode):
        raise WalkError(f"symlink to directory not followed: {path}")
    if not stat.S_ISREG(st.st_mode):
        raise WalkError(f"not a regular file: {path}")


def walk_files(root: str, on_error: Optional[ErrorHandler] = None) -> Iterator[str]:
    """
    Yield every non-directory path under ``root`` in lexical order.

    A root that is not a directory is yielded on its own. Directories are
    never entered through symlinks. Unlistable directories, dangling
    links, and special files are passed to ``on_error`` and skipped.

    Args:
        root: Scan root, as given by the caller
        on_error: Called with ``(path, exception)`` for each skipped entry

    Yields:
        Paths joined onto ``root``, so relative roots give relative paths
    """
    on_error = on_error or _log_error

    if not os.path.isdir(root):
        try:
            _check_entry(root)
        except OSError as e:
            on_error(root, e)
            return
        yield root
        return

    yield from _walk_dir(root, on_error)


def _walk_dir(directory: str, on_error: ErrorHandler) -> Iterator[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        on_error(directory, e)
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            on_error(path, e)
            continue

        if is_dir:
            yield from _walk_dir(path, on_error)
            continue

        try:
            _check_entry(path)
        except OSError as e:
            on_error(path, e)
            continue

        yield path
