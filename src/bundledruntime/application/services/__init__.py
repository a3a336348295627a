"""Application services."""

from bundledruntime.application.services.dependency_analyzer import DependencyAnalyzer
from bundledruntime.application.services.extractor import extract_nested_archives
from bundledruntime.application.services.framework import detect_framework, extra_module_for
from bundledruntime.application.services.module_composer import SAFETY_MODULES, ModuleSetComposer
from bundledruntime.application.services.pipeline import RuntimePipeline
from bundledruntime.application.services.publisher import (
    delete_tree_quietly,
    publish_atomically,
    scratch_directory,
)
from bundledruntime.application.services.runtime_builder import RuntimeImageBuilder

__all__ = [
    "SAFETY_MODULES",
    "DependencyAnalyzer",
    "ModuleSetComposer",
    "RuntimeImageBuilder",
    "RuntimePipeline",
    "delete_tree_quietly",
    "detect_framework",
    "extra_module_for",
    "extract_nested_archives",
    "publish_atomically",
    "scratch_directory",
]
