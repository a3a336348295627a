"""Domain exceptions: all public errors of bundledruntime.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class BundledRuntimeError(Exception):
    """Base for all bundledruntime error exceptions.

    Allows: except BundledRuntimeError to catch all library errors.
    """


class ToolNotFoundError(BundledRuntimeError, FileNotFoundError):
    """JDK tool executable does not exist.

    Inherits FileNotFoundError for semantic correctness.

    Attributes:
        tool: Tool name (jdeps, jlink).
        path: Location that was probed. None if no JDK home was found.
        hint: Extra advice appended to the message. Empty if none.
    """

    def __init__(self, tool: str, path: Path | None, hint: str = "") -> None:
        """Initialize with tool name, probed path and optional hint."""
        self.tool = tool
        self.path = path
        self.hint = hint
        where = f"at: {path}" if path is not None else "(no JDK home could be located)"
        message = f"{tool} not found {where}"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)


class UnsupportedJdkError(BundledRuntimeError, RuntimeError):
    """JDK is older than the requested language version.

    Attributes:
        java_home: JDK installation directory.
        found: Major version declared by the JDK.
        required: Minimum major version requested.
    """

    def __init__(self, java_home: Path, found: int, required: int) -> None:
        """Initialize with JDK home and version pair."""
        self.java_home = java_home
        self.found = found
        self.required = required
        super().__init__(f"JDK {required}+ is required, {java_home} provides {found}")


class ArtifactMissingError(BundledRuntimeError, FileNotFoundError):
    """Application artifact is absent.

    Checked before any subprocess work.

    Attributes:
        path: Expected artifact location.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with expected artifact path."""
        self.path = path
        super().__init__(f"app.jar not found at {path}")


class SubprocessFailureError(BundledRuntimeError, RuntimeError):
    """External tool exited with non-zero status.

    Carries the captured output verbatim for diagnosis.

    Attributes:
        tool: Tool name (jdeps, jlink).
        exit_code: Process exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    def __init__(self, tool: str, exit_code: int, stdout: str, stderr: str) -> None:
        """Initialize with tool name and captured outcome."""
        self.tool = tool
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"{tool} failed (exit={exit_code})\nSTDOUT:\n{stdout}\nSTDERR:\n{stderr}"
        )


class FilesystemFailureError(BundledRuntimeError, OSError):
    """Directory could not be created, deleted, renamed or copied.

    Attributes:
        path: Path the operation failed on.
        reason: What was attempted.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with failing path and reason."""
        # FAIL-FIRST: reason is what the user reads
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ExtractionError(FilesystemFailureError):
    """Nested archives could not be extracted from the application artifact."""


class ConfigurationError(BundledRuntimeError, ValueError):
    """Configuration file content is invalid.

    Attributes:
        source: File the configuration was read from.
        reason: What is wrong with it.
    """

    def __init__(self, source: Path, reason: str) -> None:
        """Initialize with config file and reason."""
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
