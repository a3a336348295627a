"""Runtime build configuration.

User-provided settings for one pipeline run. Defaults mirror a typical
server application: a conservative module baseline for manual mode and
size-reducing linker options.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_MODULES: tuple[str, ...] = (
    "java.base",
    "java.sql",
    "java.xml",
    "java.logging",
    "java.naming",
    "java.management",
    "jdk.unsupported",
)

DEFAULT_JLINK_OPTIONS: tuple[str, ...] = (
    "--strip-debug",
    "--no-header-files",
    "--no-man-pages",
    "--compress",
    "2",
)

MINIMUM_JAVA_VERSION = 17
MINIMUM_MULTI_RELEASE = 9


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable configuration with FAIL-FIRST validation.

    Attributes:
        app_root: Collected application directory (app.jar + lib/).
        destination_dir: Final location of the runtime image.
        modules: Explicit modules. Used alone when auto-detection is off,
            appended after detected modules when it is on.
        jlink_options: Linker options passed through as-is.
        auto_detect_modules: Compute modules with the dependency analyzer.
        spring_boot_project: Treat the artifact as Spring Boot without
            looking for marker entries.
        java_version: JDK major version the tools are resolved for.
        multi_release: Version the analyzer uses for multi-release jars.
        java_home: Explicit JDK home. None = discover from environment.
    """

    app_root: Path
    destination_dir: Path
    modules: tuple[str, ...] = DEFAULT_MODULES
    jlink_options: tuple[str, ...] = DEFAULT_JLINK_OPTIONS
    auto_detect_modules: bool = True
    spring_boot_project: bool = False
    java_version: int = MINIMUM_JAVA_VERSION
    multi_release: int = 21
    java_home: Path | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.app_root is None:
            raise TypeError("app_root must not be None")
        if self.destination_dir is None:
            raise TypeError("destination_dir must not be None")
        if isinstance(self.modules, str) or isinstance(self.jlink_options, str):
            raise TypeError("modules and jlink_options must be sequences, not str")
        for name in self.modules:
            if not name or name != name.strip():
                raise ValueError(f"module name must be non-empty and trimmed, got {name!r}")
        if not self.auto_detect_modules and not self.modules:
            raise ValueError("modules must not be empty when auto_detect_modules is off")
        if self.java_version < MINIMUM_JAVA_VERSION:
            raise ValueError(
                f"java_version must be >= {MINIMUM_JAVA_VERSION}, got {self.java_version}"
            )
        if self.multi_release < MINIMUM_MULTI_RELEASE:
            raise ValueError(
                f"multi_release must be >= {MINIMUM_MULTI_RELEASE}, got {self.multi_release}"
            )
        if self.destination_dir.name == "":
            raise ValueError(f"destination_dir must name a directory, got {self.destination_dir}")

    def with_overrides(self, **changes: object) -> RuntimeConfig:
        """Return copy with given fields replaced. None values are ignored."""
        effective = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **effective)  # type: ignore[arg-type]
