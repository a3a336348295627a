"""Domain model: value objects and results."""

from bundledruntime.domain.model.app_layout import AppLayout
from bundledruntime.domain.model.build_result import ComposedModules, RuntimeBuildResult
from bundledruntime.domain.model.configuration import (
    DEFAULT_JLINK_OPTIONS,
    DEFAULT_MODULES,
    RuntimeConfig,
)
from bundledruntime.domain.model.framework import (
    DetectedFramework,
    FrameworkDetection,
    PlainApplication,
)
from bundledruntime.domain.model.module_set import ModuleSet
from bundledruntime.domain.model.tool_outcome import ToolOutcome

__all__ = [
    # Value objects
    "AppLayout",
    "ModuleSet",
    "ToolOutcome",
    # Framework detection
    "DetectedFramework",
    "FrameworkDetection",
    "PlainApplication",
    # Configuration
    "DEFAULT_JLINK_OPTIONS",
    "DEFAULT_MODULES",
    "RuntimeConfig",
    # Results
    "ComposedModules",
    "RuntimeBuildResult",
]
