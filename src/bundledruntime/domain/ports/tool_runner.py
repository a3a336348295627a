"""Tool runner protocol: run external tool, capture outcome.

Narrow seam between the pipeline and process spawning.
Tests substitute a fake; infrastructure provides the subprocess adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from bundledruntime.domain.model.tool_outcome import ToolOutcome


class ToolRunnerProtocol(Protocol):
    """Contract for running an external tool synchronously."""

    def run(self, executable: Path, args: Sequence[str]) -> ToolOutcome:
        """Run executable with args and wait for it to exit.

        Non-zero exit is NOT an error here; callers decide.

        Args:
            executable: Absolute path to the tool
            args: Command line arguments (without the executable)

        Returns:
            Exit code with fully captured stdout and stderr

        Raises:
            ToolNotFoundError: If the executable cannot be launched
        """
        ...
