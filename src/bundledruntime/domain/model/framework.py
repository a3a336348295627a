"""Framework detection result: tagged union.

PlainApplication | DetectedFramework. Consumers dispatch with match.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlainApplication:
    """No framework packaging convention recognised."""


@dataclass(frozen=True, slots=True)
class DetectedFramework:
    """Artifact follows a known framework packaging convention.

    Attributes:
        name: Framework identifier, e.g. "spring-boot"
        marker: Archive entry that matched. None if forced by a config hint.
    """

    name: str
    marker: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")


FrameworkDetection = PlainApplication | DetectedFramework
