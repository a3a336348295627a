"""Application input layout value object."""

from dataclasses import dataclass
from pathlib import Path

APP_JAR_NAME = "app.jar"
LIB_DIR_NAME = "lib"
ARCHIVE_SUFFIX = ".jar"


@dataclass(frozen=True, slots=True)
class AppLayout:
    """Standard input layout of a collected application.

    <app_root>/app.jar     required root artifact
    <app_root>/lib/*.jar   optional auxiliary dependency archives

    Attributes:
        app_root: Directory holding app.jar and lib/
    """

    app_root: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.app_root is None:
            raise TypeError("app_root must not be None")

    @property
    def app_jar(self) -> Path:
        """Root application artifact."""
        return self.app_root / APP_JAR_NAME

    @property
    def lib_dir(self) -> Path:
        """Directory of auxiliary dependency archives."""
        return self.app_root / LIB_DIR_NAME

    def library_jars(self) -> tuple[Path, ...]:
        """Auxiliary archives sorted by name. Empty if lib/ is missing."""
        if not self.lib_dir.is_dir():
            return ()
        return tuple(
            sorted(
                path
                for path in self.lib_dir.iterdir()
                if path.name.endswith(ARCHIVE_SUFFIX) and path.is_file()
            )
        )
