"""JSON reporter: one document per build, for CI steps and scripts."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from bundledruntime.domain.model.framework import DetectedFramework

if TYPE_CHECKING:
    from typing import TextIO

    from bundledruntime.domain.model.build_result import RuntimeBuildResult


class JSONReporter:
    """Writes RuntimeBuildResult as JSON followed by a newline."""

    def __init__(self, stream: TextIO, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            stream: Writable text stream
            indent: Pretty-print width, None for a single line
        """
        self._stream = stream
        self._indent = indent

    def report(self, result: RuntimeBuildResult) -> None:
        """Serialize result to the stream."""
        self._stream.write(json.dumps(self.to_dict(result), indent=self._indent) + "\n")

    @staticmethod
    def to_dict(result: RuntimeBuildResult) -> dict[str, object]:
        """Plain-data view of result (paths as strings, tuples as lists)."""
        framework = None
        if isinstance(result.framework, DetectedFramework):
            framework = {"name": result.framework.name, "marker": result.framework.marker}

        return {
            "destination": str(result.destination),
            "auto_detected": result.auto_detected,
            "modules": list(result.modules),
            "jlink_options": list(result.jlink_options),
            "framework": framework,
        }
