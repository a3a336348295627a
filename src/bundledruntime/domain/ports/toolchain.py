"""Toolchain resolver protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class ToolchainResolverProtocol(Protocol):
    """Contract for locating JDK tool executables."""

    def resolve_executable(self, tool_name: str, java_version: int) -> Path:
        """Return absolute path of a JDK tool.

        Args:
            tool_name: Tool name without extension (jdeps, jlink)
            java_version: Requested JDK major version

        Returns:
            Existing executable path

        Raises:
            ToolNotFoundError: If the executable does not exist on disk
            UnsupportedJdkError: If the JDK is older than java_version
        """
        ...
