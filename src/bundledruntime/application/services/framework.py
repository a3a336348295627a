"""Framework capability detection from artifact entries.

The dependency analyzer misses modules some packaging conventions load
reflectively. Known conventions are recognised by marker class files and
mapped to one extra module each.
"""

from __future__ import annotations

import logging
import zipfile
from types import MappingProxyType
from typing import TYPE_CHECKING

from bundledruntime.domain.model.framework import (
    DetectedFramework,
    FrameworkDetection,
    PlainApplication,
)

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SPRING_BOOT = "spring-boot"

# Framework name → marker entries (any match is enough)
FRAMEWORK_MARKERS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        SPRING_BOOT: (
            "org/springframework/boot/SpringApplication.class",
            "org/springframework/boot/loader/launch/Launcher.class",
            "org/springframework/boot/loader/JarLauncher.class",
        ),
    }
)

# Framework name → module the analyzer fails to report for it
FRAMEWORK_EXTRA_MODULES: MappingProxyType[str, str] = MappingProxyType(
    {
        SPRING_BOOT: "java.desktop",
    }
)


def detect_framework(artifact: Path, *, spring_boot_hint: bool = False) -> FrameworkDetection:
    """Inspect artifact entries for a known framework convention.

    An unreadable artifact counts as plain: detection is a heuristic and
    must not fail the build.

    Args:
        artifact: Application archive
        spring_boot_hint: Skip inspection and report Spring Boot

    Returns:
        DetectedFramework with the matching marker, or PlainApplication
    """
    if spring_boot_hint:
        return DetectedFramework(name=SPRING_BOOT)

    if not artifact.is_file():
        return PlainApplication()

    try:
        with zipfile.ZipFile(artifact) as archive:
            entries = frozenset(archive.namelist())
    except (OSError, zipfile.BadZipFile) as exc:
        logger.debug("framework detection skipped, cannot read %s: %s", artifact, exc)
        return PlainApplication()

    for name, markers in FRAMEWORK_MARKERS.items():
        for marker in markers:
            if marker in entries:
                return DetectedFramework(name=name, marker=marker)

    return PlainApplication()


def extra_module_for(detection: FrameworkDetection) -> str | None:
    """Module to add for a detection result. None for plain applications."""
    match detection:
        case DetectedFramework(name=name):
            return FRAMEWORK_EXTRA_MODULES.get(name)
        case PlainApplication():
            return None
