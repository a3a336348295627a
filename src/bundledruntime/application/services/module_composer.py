"""Module set composer: detected + configured + safety + heuristic modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bundledruntime.application.services.extractor import extract_nested_archives
from bundledruntime.application.services.framework import detect_framework, extra_module_for
from bundledruntime.application.services.publisher import scratch_directory
from bundledruntime.domain.exceptions import ArtifactMissingError
from bundledruntime.domain.model.build_result import ComposedModules
from bundledruntime.domain.model.framework import PlainApplication

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bundledruntime.application.services.dependency_analyzer import DependencyAnalyzer
    from bundledruntime.domain.model.app_layout import AppLayout

logger = logging.getLogger(__name__)

# Security providers loaded at runtime are invisible to the analyzer;
# TLS elliptic-curve ciphers need this one.
SAFETY_MODULES: tuple[str, ...] = ("jdk.crypto.ec",)

NESTED_SCRATCH_PREFIX = ".jdeps-nested"


class ModuleSetComposer:
    """Builds the final module list for the linker.

    Algorithm (auto-detection on):
        1. Require app.jar (before any subprocess work)
        2. Extract nested jars into a scratch directory under the app root
        3. Analyze app.jar with lib/*.jar + nested jars on the classpath
        4. Detected modules first, then configured ones, no duplicates
        5. Add SAFETY_MODULES
        6. Add the framework heuristic module, if any
        7. Scratch directory removed on every exit path

    With auto-detection off the configured list is returned untouched.
    """

    def __init__(self, analyzer: DependencyAnalyzer) -> None:
        """Initialize composer.

        Args:
            analyzer: Runs the dependency analysis. Only used with auto-detection.
        """
        self._analyzer = analyzer

    def compose(
        self,
        layout: AppLayout,
        modules: Sequence[str],
        *,
        auto_detect: bool,
        spring_boot_hint: bool = False,
    ) -> ComposedModules:
        """Compose the module list.

        Args:
            layout: Application input layout
            modules: User-configured modules
            auto_detect: Run the dependency analyzer
            spring_boot_hint: Force the Spring Boot heuristic

        Returns:
            ComposedModules in linker order

        Raises:
            ArtifactMissingError: If auto-detecting and app.jar is absent
            ExtractionError: If nested jars cannot be extracted
            SubprocessFailureError: If the analyzer fails
        """
        if not auto_detect:
            return ComposedModules(
                modules=tuple(modules), auto_detected=False, framework=PlainApplication()
            )

        app_jar = layout.app_jar
        if not app_jar.is_file():
            raise ArtifactMissingError(app_jar.absolute())

        with scratch_directory(layout.app_root, NESTED_SCRATCH_PREFIX) as scratch:
            nested = extract_nested_archives(app_jar, scratch)
            classpath = [*layout.library_jars(), *nested]
            detected = self._analyzer.analyze(app_jar, classpath)

        composed = detected.union(modules)
        for name in SAFETY_MODULES:
            composed = composed.with_module(name)

        framework = detect_framework(app_jar, spring_boot_hint=spring_boot_hint)
        extra = extra_module_for(framework)
        if extra is not None:
            composed = composed.with_module(extra)

        logger.info("auto-detected modules: %s", composed.to_argument())
        return ComposedModules(modules=composed.names, auto_detected=True, framework=framework)
