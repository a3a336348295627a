"""Application layer for runtime image assembly.

Components:
- services: extraction, analysis, composition, linking, publication
- reporters: Output formatting (Console, JSON)
"""

from bundledruntime.application.reporters import ConsoleReporter, JSONReporter
from bundledruntime.application.services import (
    DependencyAnalyzer,
    ModuleSetComposer,
    RuntimeImageBuilder,
    RuntimePipeline,
    publish_atomically,
)

__all__ = [
    # Services
    "DependencyAnalyzer",
    "ModuleSetComposer",
    "RuntimeImageBuilder",
    "RuntimePipeline",
    "publish_atomically",
    # Reporters
    "ConsoleReporter",
    "JSONReporter",
]
