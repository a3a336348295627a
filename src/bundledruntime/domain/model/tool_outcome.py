"""Captured result of one external tool invocation."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ToolOutcome:
    """Exit code plus fully buffered output of a finished process.

    Consumed immediately to decide success or failure, never persisted.

    Attributes:
        exit_code: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        """True if the process exited with status 0."""
        return self.exit_code == 0
