"""JDK toolchain resolver: locate jdeps/jlink of an installed JDK.

JDK home lookup order:
    1. Explicit java_home
    2. JAVA_HOME_<N>_X64 (CI runners install several JDKs side by side)
    3. JAVA_HOME
    4. Two levels above `java` found on PATH (<home>/bin/java)
"""

from __future__ import annotations

import os
import re
import shutil
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from bundledruntime.domain.exceptions import ToolNotFoundError, UnsupportedJdkError

if TYPE_CHECKING:
    from collections.abc import Mapping

# JAVA_VERSION="21.0.2" / "1.8.0_392" in <home>/release
_RELEASE_VERSION_PATTERN = re.compile(r'^JAVA_VERSION="?(\d+)(?:\.(\d+))?', re.MULTILINE)

JRE_HINTS: dict[str, str] = {
    "jlink": "Make sure a full JDK is installed, not a JRE",
}


def is_windows() -> bool:
    """True on Windows hosts (tools carry an .exe suffix)."""
    return sys.platform.startswith("win")


def executable_name(tool_name: str) -> str:
    """Platform file name of a JDK tool."""
    return f"{tool_name}.exe" if is_windows() else tool_name


def read_release_version(java_home: Path) -> int | None:
    """Major version declared in <java_home>/release.

    Returns:
        Major version (8 for "1.8.x"), None if the file is missing or
        carries no JAVA_VERSION line
    """
    release = java_home / "release"
    try:
        content = release.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None

    match = _RELEASE_VERSION_PATTERN.search(content)
    if match is None:
        return None
    major = int(match.group(1))
    if major == 1 and match.group(2) is not None:
        return int(match.group(2))
    return major


class JdkToolchainResolver:
    """Resolves JDK tools from an explicit home or the environment."""

    def __init__(
        self,
        java_home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            java_home: Explicit JDK home. None = discover.
            environ: Environment to read (default: os.environ)
        """
        self._java_home = java_home
        self._environ = environ if environ is not None else os.environ

    def find_java_home(self, java_version: int) -> Path | None:
        """Locate a JDK home. None if nothing is configured or on PATH."""
        if self._java_home is not None:
            return self._java_home

        for key in (f"JAVA_HOME_{java_version}_X64", "JAVA_HOME"):
            value = self._environ.get(key)
            if value:
                return Path(value)

        java = shutil.which(executable_name("java"), path=self._environ.get("PATH", ""))
        if java is not None:
            return Path(java).resolve().parent.parent
        return None

    def resolve_executable(self, tool_name: str, java_version: int) -> Path:
        """Return absolute path of tool_name inside the JDK.

        Args:
            tool_name: jdeps, jlink, ...
            java_version: Minimum JDK major version

        Returns:
            Absolute path to an existing executable

        Raises:
            ToolNotFoundError: If no JDK home is found or the tool is missing
            UnsupportedJdkError: If the JDK declares an older version
        """
        hint = JRE_HINTS.get(tool_name, "")
        java_home = self.find_java_home(java_version)
        if java_home is None:
            raise ToolNotFoundError(tool_name, None, hint)

        found = read_release_version(java_home)
        if found is not None and found < java_version:
            raise UnsupportedJdkError(java_home, found, java_version)

        tool = (java_home / "bin" / executable_name(tool_name)).absolute()
        if not tool.is_file():
            raise ToolNotFoundError(tool_name, tool, hint)
        return tool
