"""Scratch directory lifecycle and atomic publication.

The linker writes into a scratch directory next to the final location.
publish_atomically() swaps it into place so the final location is either
the previous image or the complete new one, never a mix.
"""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from bundledruntime.domain.exceptions import FilesystemFailureError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)


def delete_tree_quietly(path: Path) -> bool:
    """Best-effort recursive delete. Never raises.

    Cleanup failures must not mask the primary outcome of a run.

    Args:
        path: File or directory to remove. Missing paths are fine.

    Returns:
        True if path no longer exists afterwards
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("could not remove %s: %s", path, exc)
    return not path.exists()


def unique_sibling(path: Path, tag: str) -> Path:
    """Name a fresh sibling of path: <name>.<tag>-<random hex>."""
    return path.parent / f"{path.name}.{tag}-{uuid.uuid4().hex}"


@contextmanager
def scratch_directory(parent: Path, prefix: str) -> Iterator[Path]:
    """Create a uniquely named directory under parent, delete it on exit.

    Deletion runs on every exit path and is best-effort.

    Args:
        parent: Directory to create the scratch directory in
        prefix: Name prefix; a random suffix is appended

    Yields:
        Path of the (existing, empty) scratch directory

    Raises:
        FilesystemFailureError: If the directory cannot be created
    """
    path = parent / f"{prefix}-{uuid.uuid4().hex}"
    try:
        path.mkdir(parents=True)
    except OSError as exc:
        raise FilesystemFailureError(path, "Cannot create scratch directory") from exc
    try:
        yield path
    finally:
        delete_tree_quietly(path)


def publish_atomically(
    scratch_dir: Path,
    final_dir: Path,
    *,
    rename: Callable[[Path, Path], object] = os.rename,
) -> None:
    """Move a finished scratch directory to its final location.

    Steps:
        1. Existing final_dir (directory or stray file) is renamed aside to
           <name>.old-<hex>. If that fails, scratch_dir is discarded and
           final_dir is not touched.
        2. scratch_dir is renamed to final_dir.
        3. If renaming fails (cross-device, locked files), scratch_dir is
           copied into final_dir and then deleted.
        4. On failure of 2-3 the old content is renamed back; on success
           it is deleted best-effort.

    The previous content is never deleted before the new image is in place.

    Args:
        scratch_dir: Complete image built in a sibling scratch location
        final_dir: Destination callers read the image from
        rename: Rename primitive (os.rename)

    Raises:
        FilesystemFailureError: If final_dir cannot be replaced or filled
    """
    previous: Path | None = None
    if final_dir.exists() or final_dir.is_symlink():
        previous = unique_sibling(final_dir, "old")
        try:
            rename(final_dir, previous)
        except OSError as exc:
            delete_tree_quietly(scratch_dir)
            raise FilesystemFailureError(final_dir, "Cannot replace existing runtime dir") from exc

    try:
        _move_into_place(scratch_dir, final_dir, rename)
    except FilesystemFailureError:
        if previous is not None:
            _restore_previous(previous, final_dir, rename)
        raise

    if previous is not None:
        delete_tree_quietly(previous)


def _move_into_place(
    scratch_dir: Path, final_dir: Path, rename: Callable[[Path, Path], object]
) -> None:
    try:
        rename(scratch_dir, final_dir)
        return
    except OSError as exc:
        logger.debug("rename %s -> %s failed (%s), copying instead", scratch_dir, final_dir, exc)

    try:
        shutil.copytree(scratch_dir, final_dir, symlinks=True)
    except (OSError, shutil.Error) as exc:
        delete_tree_quietly(final_dir)
        delete_tree_quietly(scratch_dir)
        raise FilesystemFailureError(final_dir, "Cannot copy runtime image into place") from exc
    delete_tree_quietly(scratch_dir)


def _restore_previous(
    previous: Path, final_dir: Path, rename: Callable[[Path, Path], object]
) -> None:
    """Put the set-aside content back. Logs instead of raising."""
    try:
        rename(previous, final_dir)
    except OSError as exc:
        logger.error("could not restore %s from %s: %s", final_dir, previous, exc)
