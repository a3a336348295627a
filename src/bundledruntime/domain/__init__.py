"""bundledruntime domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, pathlib, collections.abc
"""

from bundledruntime.domain.exceptions import (
    ArtifactMissingError,
    BundledRuntimeError,
    ConfigurationError,
    ExtractionError,
    FilesystemFailureError,
    SubprocessFailureError,
    ToolNotFoundError,
    UnsupportedJdkError,
)
from bundledruntime.domain.model import (
    AppLayout,
    ComposedModules,
    DetectedFramework,
    FrameworkDetection,
    ModuleSet,
    PlainApplication,
    RuntimeBuildResult,
    RuntimeConfig,
    ToolOutcome,
)
from bundledruntime.domain.ports import ToolchainResolverProtocol, ToolRunnerProtocol

__all__ = [
    # Exceptions
    "BundledRuntimeError",
    "ToolNotFoundError",
    "UnsupportedJdkError",
    "ArtifactMissingError",
    "SubprocessFailureError",
    "FilesystemFailureError",
    "ExtractionError",
    "ConfigurationError",
    # Value objects
    "AppLayout",
    "ModuleSet",
    "ToolOutcome",
    "DetectedFramework",
    "FrameworkDetection",
    "PlainApplication",
    # Configuration / results
    "RuntimeConfig",
    "ComposedModules",
    "RuntimeBuildResult",
    # Ports
    "ToolRunnerProtocol",
    "ToolchainResolverProtocol",
]
