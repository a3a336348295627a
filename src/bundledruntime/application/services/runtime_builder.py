"""Runtime image builder: jlink into scratch, publish atomically."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bundledruntime.application.services.publisher import (
    delete_tree_quietly,
    publish_atomically,
    unique_sibling,
)
from bundledruntime.domain.exceptions import FilesystemFailureError, SubprocessFailureError
from bundledruntime.domain.model.configuration import MINIMUM_JAVA_VERSION

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from bundledruntime.domain.ports import ToolchainResolverProtocol, ToolRunnerProtocol

logger = logging.getLogger(__name__)

JLINK = "jlink"


class RuntimeImageBuilder:
    """Links a runtime image and swaps it into the destination.

    jlink refuses to write into an existing directory, so every build
    targets a fresh sibling <destination>.tmp-<random> first.
    """

    def __init__(
        self,
        toolchain: ToolchainResolverProtocol,
        runner: ToolRunnerProtocol,
        *,
        java_version: int = MINIMUM_JAVA_VERSION,
    ) -> None:
        """Initialize builder.

        Args:
            toolchain: Locates the jlink executable
            runner: Runs jlink and captures its output
            java_version: JDK major version to resolve jlink for
        """
        self._toolchain = toolchain
        self._runner = runner
        self._java_version = java_version

    @staticmethod
    def build_args(modules: Sequence[str], jlink_options: Sequence[str], output: Path) -> list[str]:
        """Compose the jlink command line (without the executable)."""
        return [
            *jlink_options,
            "--add-modules",
            ",".join(modules),
            "--output",
            str(output.absolute()),
        ]

    def build(self, modules: Sequence[str], jlink_options: Sequence[str], destination: Path) -> Path:
        """Produce a runtime image at destination.

        On any failure the previous content of destination is kept.

        Args:
            modules: Modules in linker order (must not be empty)
            jlink_options: Options passed through before --add-modules
            destination: Final image directory

        Returns:
            destination

        Raises:
            ValueError: If modules is empty
            ToolNotFoundError: If jlink cannot be located
            SubprocessFailureError: If jlink exits non-zero
            FilesystemFailureError: If the image cannot be published
        """
        # FAIL-FIRST: jlink rejects an empty --add-modules
        if not modules:
            raise ValueError("modules must not be empty")

        jlink = self._toolchain.resolve_executable(JLINK, self._java_version)

        parent = destination.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemFailureError(parent, "Cannot create parent directory") from exc

        scratch = unique_sibling(destination, "tmp")
        outcome = self._runner.run(jlink, self.build_args(modules, jlink_options, scratch))
        if not outcome.succeeded:
            delete_tree_quietly(scratch)
            raise SubprocessFailureError(JLINK, outcome.exit_code, outcome.stdout, outcome.stderr)

        publish_atomically(scratch, destination)
        logger.info("runtime image published -> %s", destination)
        return destination
