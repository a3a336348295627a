"""Runtime pipeline: configuration in, published runtime image out."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bundledruntime.application.services.dependency_analyzer import DependencyAnalyzer
from bundledruntime.application.services.module_composer import ModuleSetComposer
from bundledruntime.application.services.runtime_builder import RuntimeImageBuilder
from bundledruntime.domain.model.app_layout import AppLayout
from bundledruntime.domain.model.build_result import RuntimeBuildResult

if TYPE_CHECKING:
    from bundledruntime.domain.model.configuration import RuntimeConfig
    from bundledruntime.domain.ports import ToolchainResolverProtocol, ToolRunnerProtocol


class RuntimePipeline:
    """Composes modules, links the image and publishes it.

    Stages run strictly in sequence. Any stage failure aborts the run.
    """

    def __init__(
        self,
        toolchain: ToolchainResolverProtocol | None = None,
        runner: ToolRunnerProtocol | None = None,
    ) -> None:
        """Initialize pipeline.

        Args:
            toolchain: Tool locator. None = resolver from the environment
                (uses RuntimeConfig.java_home when set).
            runner: Process runner. None = SubprocessToolRunner.
        """
        self._toolchain = toolchain
        self._runner = runner

    def run(self, config: RuntimeConfig) -> RuntimeBuildResult:
        """Build and publish the runtime image described by config.

        Args:
            config: Pipeline configuration

        Returns:
            RuntimeBuildResult for the published image

        Raises:
            BundledRuntimeError: Any pipeline failure (see domain.exceptions)
        """
        toolchain = self._toolchain or self._default_toolchain(config)
        runner = self._runner or self._default_runner()

        analyzer = DependencyAnalyzer(
            toolchain,
            runner,
            java_version=config.java_version,
            multi_release=config.multi_release,
        )
        composed = ModuleSetComposer(analyzer).compose(
            AppLayout(config.app_root),
            config.modules,
            auto_detect=config.auto_detect_modules,
            spring_boot_hint=config.spring_boot_project,
        )

        builder = RuntimeImageBuilder(toolchain, runner, java_version=config.java_version)
        destination = builder.build(composed.modules, config.jlink_options, config.destination_dir)

        return RuntimeBuildResult(
            destination=destination,
            modules=composed.modules,
            jlink_options=tuple(config.jlink_options),
            auto_detected=composed.auto_detected,
            framework=composed.framework,
        )

    @staticmethod
    def _default_toolchain(config: RuntimeConfig) -> ToolchainResolverProtocol:
        from bundledruntime.infrastructure.toolchain import JdkToolchainResolver

        return JdkToolchainResolver(java_home=config.java_home)

    @staticmethod
    def _default_runner() -> ToolRunnerProtocol:
        from bundledruntime.infrastructure.subprocess_runner import SubprocessToolRunner

        return SubprocessToolRunner()
