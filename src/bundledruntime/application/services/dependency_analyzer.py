"""Dependency analyzer service: jdeps → minimal module set."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from bundledruntime.domain.exceptions import SubprocessFailureError
from bundledruntime.domain.model.configuration import MINIMUM_JAVA_VERSION
from bundledruntime.domain.model.module_set import ModuleSet

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from bundledruntime.domain.ports import ToolchainResolverProtocol, ToolRunnerProtocol

JDEPS = "jdeps"


class DependencyAnalyzer:
    """Runs jdeps in --print-module-deps mode.

    The executable is resolved on first use, so constructing an analyzer
    never touches the toolchain.
    """

    def __init__(
        self,
        toolchain: ToolchainResolverProtocol,
        runner: ToolRunnerProtocol,
        *,
        java_version: int = MINIMUM_JAVA_VERSION,
        multi_release: int = 21,
    ) -> None:
        """Initialize analyzer.

        Args:
            toolchain: Locates the jdeps executable
            runner: Runs jdeps and captures its output
            java_version: JDK major version to resolve jdeps for
            multi_release: Version selected in multi-release jars
        """
        self._toolchain = toolchain
        self._runner = runner
        self._java_version = java_version
        self._multi_release = multi_release

    def build_args(self, artifact: Path, classpath: Sequence[Path]) -> list[str]:
        """Compose the jdeps command line (without the executable)."""
        args = ["--ignore-missing-deps", "--multi-release", str(self._multi_release)]
        if classpath:
            args += ["-cp", os.pathsep.join(str(path.absolute()) for path in classpath)]
        args += ["--print-module-deps", str(artifact.absolute())]
        return args

    def analyze(self, artifact: Path, classpath: Sequence[Path] = ()) -> ModuleSet:
        """Compute the minimal module closure of artifact.

        Args:
            artifact: Application archive to analyze
            classpath: Dependency archives (may be empty)

        Returns:
            Modules reported by jdeps, in output order

        Raises:
            ToolNotFoundError: If jdeps cannot be located
            SubprocessFailureError: If jdeps exits non-zero
        """
        jdeps = self._toolchain.resolve_executable(JDEPS, self._java_version)
        outcome = self._runner.run(jdeps, self.build_args(artifact, classpath))
        if not outcome.succeeded:
            raise SubprocessFailureError(JDEPS, outcome.exit_code, outcome.stdout, outcome.stderr)
        return ModuleSet.parse(outcome.stdout)
