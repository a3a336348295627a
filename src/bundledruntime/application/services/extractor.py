"""Nested archive extraction for fat application artifacts.

A fat artifact (e.g. Spring Boot BOOT-INF/lib/*.jar) embeds its dependency
archives. The dependency analyzer needs them as real files on a classpath.
"""

from __future__ import annotations

import logging
import shutil
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from bundledruntime.domain.exceptions import ExtractionError
from bundledruntime.domain.model.app_layout import ARCHIVE_SUFFIX

logger = logging.getLogger(__name__)


def extract_nested_archives(root_archive: Path, scratch_dir: Path) -> list[Path]:
    """Copy every nested *.jar entry of root_archive into scratch_dir.

    Each entry becomes <n>_<basename> where n counts entries in archive
    order from 0. The prefix keeps entries with equal basenames apart
    (lib/a/x.jar and lib/b/x.jar).

    Caller owns scratch_dir cleanup.

    Args:
        root_archive: Application artifact (zip/jar)
        scratch_dir: Target directory; created if missing

    Returns:
        Extracted files in archive order

    Raises:
        ExtractionError: If scratch_dir cannot be created or the archive
            or an entry cannot be read/copied
    """
    try:
        scratch_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractionError(scratch_dir, "Failed to create temp dir for nested JARs") from exc

    extracted: list[Path] = []
    # Unreadable entries: zlib.error (corrupt data), RuntimeError (encrypted),
    # NotImplementedError (unknown compression method)
    try:
        with zipfile.ZipFile(root_archive) as archive:
            for entry in archive.infolist():
                if entry.is_dir() or not entry.filename.endswith(ARCHIVE_SUFFIX):
                    continue

                basename = PurePosixPath(entry.filename).name
                target = scratch_dir / f"{len(extracted)}_{basename}"
                with archive.open(entry) as source, target.open("wb") as sink:
                    shutil.copyfileobj(source, sink)

                logger.debug("extracted nested jar: %s", target)
                extracted.append(target)
    except (OSError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError) as exc:
        raise ExtractionError(root_archive, "Failed to extract nested JARs") from exc

    return extracted
