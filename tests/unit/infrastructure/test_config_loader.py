"""Tests for load_config()."""

from __future__ import annotations

from pathlib import Path

import pytest

from bundledruntime.domain.exceptions import ConfigurationError
from bundledruntime.domain.model.configuration import DEFAULT_MODULES
from bundledruntime.infrastructure.config_loader import load_config


def _write(tmp_path: Path, content: str, name: str = "bundledruntime.toml") -> Path:
    path = tmp_path / name
    path.write_text(content)
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_top_level_table(self, tmp_path: Path) -> None:
        """Plain TOML file with kebab-case keys."""
        path = _write(
            tmp_path,
            'app-root = "build/bundled/app"\n'
            'destination-dir = "build/bundled/runtime"\n'
            'modules = ["java.base"]\n'
            "auto-detect-modules = false\n"
            "java-version = 21\n",
        )

        config = load_config(path)

        assert config.app_root == tmp_path / "build/bundled/app"
        assert config.destination_dir == tmp_path / "build/bundled/runtime"
        assert config.modules == ("java.base",)
        assert config.auto_detect_modules is False
        assert config.java_version == 21

    def test_pyproject_table(self, tmp_path: Path) -> None:
        """[tool.bundledruntime] of a pyproject-style file."""
        path = _write(
            tmp_path,
            '[project]\nname = "x"\n\n'
            "[tool.bundledruntime]\n"
            'app_root = "/abs/app"\n'
            'destination_dir = "/abs/runtime"\n'
            'jlink_options = ["--strip-debug"]\n'
            "spring_boot_project = true\n",
            name="pyproject.toml",
        )

        config = load_config(path)

        assert config.app_root == Path("/abs/app")
        assert config.jlink_options == ("--strip-debug",)
        assert config.spring_boot_project is True
        assert config.modules == DEFAULT_MODULES

    def test_overrides_win(self, tmp_path: Path) -> None:
        """Non-None overrides replace file values."""
        path = _write(tmp_path, 'app-root = "app"\ndestination-dir = "out"\n')

        config = load_config(path, destination_dir=Path("/elsewhere"), java_version=None)

        assert config.destination_dir == Path("/elsewhere")
        assert config.java_version == 17

    def test_missing_required_key(self, tmp_path: Path) -> None:
        """app_root and destination_dir are required."""
        path = _write(tmp_path, 'app-root = "app"\n')

        with pytest.raises(ConfigurationError, match="destination_dir"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Typos are reported."""
        path = _write(tmp_path, 'app-root = "a"\ndestination-dir = "b"\nmodulez = []\n')

        with pytest.raises(ConfigurationError, match="unknown key 'modulez'"):
            load_config(path)

    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ('modules = "java.base"', "list of strings"),
            ('auto-detect-modules = "yes"', "boolean"),
            ("java-version = true", "integer"),
            ("java-home = 3", "string path"),
        ],
    )
    def test_wrong_types(self, tmp_path: Path, line: str, message: str) -> None:
        """Values are type-checked."""
        path = _write(tmp_path, f'app-root = "a"\ndestination-dir = "b"\n{line}\n')

        with pytest.raises(ConfigurationError, match=message):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """RuntimeConfig validation errors become ConfigurationError."""
        path = _write(tmp_path, 'app-root = "a"\ndestination-dir = "b"\njava-version = 11\n')

        with pytest.raises(ConfigurationError, match="java_version"):
            load_config(path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        """Syntax errors are reported."""
        path = _write(tmp_path, "app-root = \n")

        with pytest.raises(ConfigurationError, match="malformed TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Unreadable file is reported."""
        with pytest.raises(ConfigurationError, match="cannot read file"):
            load_config(tmp_path / "absent.toml")

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """[tool] without our table is an error."""
        path = _write(tmp_path, "[tool.ruff]\nline-length = 100\n", name="pyproject.toml")

        with pytest.raises(ConfigurationError, match="missing \\[tool.bundledruntime\\]"):
            load_config(path)
