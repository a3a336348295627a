"""Pipeline results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bundledruntime.domain.model.framework import PlainApplication

if TYPE_CHECKING:
    from pathlib import Path

    from bundledruntime.domain.model.framework import FrameworkDetection


@dataclass(frozen=True, slots=True)
class ComposedModules:
    """Final module list handed to the linker.

    Attributes:
        modules: Module names in linker order. Duplicates only possible
            when auto-detection is off (configured list passes through).
        auto_detected: True if the dependency analyzer contributed.
        framework: Framework detection outcome. Plain when not detected.
    """

    modules: tuple[str, ...]
    auto_detected: bool
    framework: FrameworkDetection = PlainApplication()


@dataclass(frozen=True, slots=True)
class RuntimeBuildResult:
    """Outcome of a successful pipeline run.

    Attributes:
        destination: Published runtime image directory.
        modules: Modules the image was linked from.
        jlink_options: Pass-through options given to the linker.
        auto_detected: True if modules came from the dependency analyzer.
        framework: Framework detection outcome.
    """

    destination: Path
    modules: tuple[str, ...]
    jlink_options: tuple[str, ...]
    auto_detected: bool
    framework: FrameworkDetection
