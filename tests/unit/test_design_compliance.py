"""Design compliance tests.

- Immutability: value objects are frozen
- Layering: inner layers never import outer ones
- Error hierarchy: every domain error is also a builtin error
"""

from __future__ import annotations

import ast
import dataclasses
from pathlib import Path

import pytest

from bundledruntime.domain import exceptions
from bundledruntime.domain.model.app_layout import AppLayout
from bundledruntime.domain.model.build_result import ComposedModules, RuntimeBuildResult
from bundledruntime.domain.model.configuration import RuntimeConfig
from bundledruntime.domain.model.framework import DetectedFramework
from bundledruntime.domain.model.module_set import ModuleSet
from bundledruntime.domain.model.tool_outcome import ToolOutcome

PACKAGE_ROOT = Path(__file__).parents[2] / "src" / "bundledruntime"

# Layer → packages it must not import
FORBIDDEN_IMPORTS: dict[str, tuple[str, ...]] = {
    "domain": (
        "bundledruntime.application",
        "bundledruntime.infrastructure",
        "bundledruntime.presentation",
    ),
    "application": ("bundledruntime.presentation",),
    "infrastructure": ("bundledruntime.application", "bundledruntime.presentation"),
}


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(), filename=str(path))
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            names.add(node.module)
    return names


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects cannot be mutated after construction."""

    @pytest.mark.parametrize(
        ("instance", "field"),
        [
            (ModuleSet.of("java.base"), "names"),
            (ToolOutcome(0), "exit_code"),
            (AppLayout(Path("app")), "app_root"),
            (DetectedFramework("spring-boot"), "name"),
            (RuntimeConfig(Path("app"), Path("runtime")), "java_version"),
            (ComposedModules(("java.base",), auto_detected=False), "modules"),
            (
                RuntimeBuildResult(
                    destination=Path("runtime"),
                    modules=("java.base",),
                    jlink_options=(),
                    auto_detected=False,
                    framework=DetectedFramework("spring-boot"),
                ),
                "destination",
            ),
        ],
    )
    def test_frozen(self, instance: object, field: str) -> None:
        """Assignment raises FrozenInstanceError."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(instance, field, None)


# =============================================================================
# Layering
# =============================================================================


class TestLayering:
    """Dependencies point inward: presentation → application → domain."""

    @pytest.mark.parametrize("layer", sorted(FORBIDDEN_IMPORTS))
    def test_no_outward_imports(self, layer: str) -> None:
        """No module of the layer imports a forbidden package."""
        offenders = [
            f"{path.relative_to(PACKAGE_ROOT)} imports {name}"
            for path in sorted((PACKAGE_ROOT / layer).rglob("*.py"))
            for name in _imported_modules(path)
            if name.startswith(FORBIDDEN_IMPORTS[layer])
        ]

        assert offenders == []


# =============================================================================
# Error hierarchy
# =============================================================================


class TestErrorHierarchy:
    """Domain errors can be caught either way."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (exceptions.ToolNotFoundError("jlink", None), FileNotFoundError),
            (exceptions.UnsupportedJdkError(Path("/jdk"), 11, 17), RuntimeError),
            (exceptions.ArtifactMissingError(Path("app.jar")), FileNotFoundError),
            (exceptions.SubprocessFailureError("jdeps", 1, "", ""), RuntimeError),
            (exceptions.FilesystemFailureError(Path("x"), "Cannot move"), OSError),
            (exceptions.ExtractionError(Path("x"), "Failed"), OSError),
            (exceptions.ConfigurationError(Path("cfg.toml"), "bad"), ValueError),
        ],
    )
    def test_dual_inheritance(self, error: Exception, builtin: type[Exception]) -> None:
        """Each error is a BundledRuntimeError and its builtin counterpart."""
        assert isinstance(error, exceptions.BundledRuntimeError)
        assert isinstance(error, builtin)
