"""Tests for JdkToolchainResolver."""

from __future__ import annotations

from pathlib import Path

import pytest

from bundledruntime.domain.exceptions import ToolNotFoundError, UnsupportedJdkError
from bundledruntime.infrastructure import toolchain as toolchain_module
from bundledruntime.infrastructure.toolchain import (
    JdkToolchainResolver,
    executable_name,
    read_release_version,
)


def _make_jdk(root: Path, *, version: str | None = "21.0.2", tools: tuple[str, ...] = ()) -> Path:
    bin_dir = root / "bin"
    bin_dir.mkdir(parents=True)
    for tool in ("java", *tools):
        executable = bin_dir / executable_name(tool)
        executable.write_text("#!/bin/sh\n")
        executable.chmod(0o755)
    if version is not None:
        (root / "release").write_text(f'IMPLEMENTOR="Test"\nJAVA_VERSION="{version}"\n')
    return root


@pytest.fixture(autouse=True)
def _posix_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(toolchain_module, "is_windows", lambda: False)


class TestReadReleaseVersion:
    """Tests for read_release_version()."""

    @pytest.mark.parametrize(
        ("declared", "major"),
        [("21.0.2", 21), ("17", 17), ("1.8.0_392", 8), ("22-ea", 22)],
    )
    def test_versions(self, tmp_path: Path, declared: str, major: int) -> None:
        """Modern and legacy version schemes."""
        jdk = _make_jdk(tmp_path / "jdk", version=declared)

        assert read_release_version(jdk) == major

    def test_missing_release_file(self, tmp_path: Path) -> None:
        """No release file → None."""
        assert read_release_version(_make_jdk(tmp_path / "jdk", version=None)) is None


class TestFindJavaHome:
    """JDK home lookup order."""

    def test_explicit_home_wins(self, tmp_path: Path) -> None:
        """Explicit java_home beats the environment."""
        resolver = JdkToolchainResolver(tmp_path / "explicit", {"JAVA_HOME": "/env"})

        assert resolver.find_java_home(17) == tmp_path / "explicit"

    def test_versioned_variable_before_java_home(self) -> None:
        """JAVA_HOME_<N>_X64 beats JAVA_HOME."""
        resolver = JdkToolchainResolver(
            environ={"JAVA_HOME_21_X64": "/jdk21", "JAVA_HOME": "/jdk17"}
        )

        assert resolver.find_java_home(21) == Path("/jdk21")
        assert resolver.find_java_home(17) == Path("/jdk17")

    def test_java_on_path(self, tmp_path: Path) -> None:
        """Falls back to <home>/bin/java found on PATH."""
        jdk = _make_jdk(tmp_path / "jdk")
        resolver = JdkToolchainResolver(environ={"PATH": str(jdk / "bin")})

        assert resolver.find_java_home(17) == jdk.resolve()

    def test_nothing_found(self) -> None:
        """Empty environment → None."""
        assert JdkToolchainResolver(environ={}).find_java_home(17) is None


class TestResolveExecutable:
    """Tests for resolve_executable()."""

    def test_resolves_tool(self, tmp_path: Path) -> None:
        """Existing tool path is returned."""
        jdk = _make_jdk(tmp_path / "jdk", tools=("jdeps", "jlink"))
        resolver = JdkToolchainResolver(jdk)

        assert resolver.resolve_executable("jlink", 17) == (jdk / "bin" / "jlink").absolute()
        assert resolver.resolve_executable("jdeps", 21) == (jdk / "bin" / "jdeps").absolute()

    def test_missing_jlink_hints_full_jdk(self, tmp_path: Path) -> None:
        """JRE without jlink → hint about a full JDK."""
        jre = _make_jdk(tmp_path / "jre")

        with pytest.raises(ToolNotFoundError, match="full JDK") as info:
            JdkToolchainResolver(jre).resolve_executable("jlink", 17)

        assert info.value.path == (jre / "bin" / "jlink").absolute()

    def test_missing_jdeps_has_no_hint(self, tmp_path: Path) -> None:
        """Only jlink carries the JRE hint."""
        jre = _make_jdk(tmp_path / "jre")

        with pytest.raises(ToolNotFoundError) as info:
            JdkToolchainResolver(jre).resolve_executable("jdeps", 17)

        assert info.value.hint == ""

    def test_no_home(self) -> None:
        """No JDK at all → ToolNotFoundError without path."""
        with pytest.raises(ToolNotFoundError, match="no JDK home") as info:
            JdkToolchainResolver(environ={}).resolve_executable("jlink", 17)

        assert info.value.path is None

    def test_old_jdk_rejected(self, tmp_path: Path) -> None:
        """Declared version below requested raises UnsupportedJdkError."""
        jdk = _make_jdk(tmp_path / "jdk", version="11.0.22", tools=("jlink",))

        with pytest.raises(UnsupportedJdkError) as info:
            JdkToolchainResolver(jdk).resolve_executable("jlink", 17)

        assert (info.value.found, info.value.required) == (11, 17)

    def test_unknown_version_accepted(self, tmp_path: Path) -> None:
        """Without release file the version check is skipped."""
        jdk = _make_jdk(tmp_path / "jdk", version=None, tools=("jlink",))

        assert JdkToolchainResolver(jdk).resolve_executable("jlink", 21).is_file()

    def test_windows_suffix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Tools carry .exe on Windows."""
        monkeypatch.setattr(toolchain_module, "is_windows", lambda: True)

        assert executable_name("jlink") == "jlink.exe"
