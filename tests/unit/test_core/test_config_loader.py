"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from src.core.config.loader import ConfigLoader
from src.core.exceptions.errors import ConfigurationError


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_and_get(self, temp_dir: Path) -> None:
        path = temp_dir / "build.yaml"
        path.write_text("checkerframework:\n  tasks:\n    - compileJava\n")

        loader = ConfigLoader(path)
        loader.load()

        assert loader.get("checkerframework.tasks") == ["compileJava"]
        assert loader.get("checkerframework.checkers", []) == []
        assert loader.get("missing.key", "default") == "default"

    def test_load_without_path(self) -> None:
        assert ConfigLoader().load() == {}

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert ConfigLoader(path).load() == {}

    def test_missing_file(self, temp_dir: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(temp_dir / "missing.yaml").load()

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.yaml"
        path.write_text("checkerframework: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(path).load()

    def test_non_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader(path).load()

    def test_get_section_non_dict(self, temp_dir: Path) -> None:
        path = temp_dir / "build.yaml"
        path.write_text("project: demo\n")

        loader = ConfigLoader(path)
        loader.load()

        assert loader.get_section("project") == {}


class TestExtensionBlock:
    """Tests for ConfigLoader.extension_block."""

    def _loader(self, temp_dir: Path, content: str) -> ConfigLoader:
        path = temp_dir / "build.yaml"
        path.write_text(content)
        loader = ConfigLoader(path)
        loader.load()
        return loader

    def test_block(self, temp_dir: Path) -> None:
        loader = self._loader(
            temp_dir,
            "checkerframework:\n  checkers: [a.B]\n  known_checkers: [nullness]\n",
        )
        assert loader.extension_block() == {"checkers": ["a.B"], "known_checkers": ["nullness"]}

    def test_missing_block(self, temp_dir: Path) -> None:
        loader = self._loader(temp_dir, "project:\n  name: demo\n")
        assert loader.extension_block() == {}

    def test_scalar_instead_of_list(self, temp_dir: Path) -> None:
        loader = self._loader(temp_dir, "checkerframework:\n  tasks: compileJava\n")

        with pytest.raises(ConfigurationError) as exc_info:
            loader.extension_block()

        assert exc_info.value.details["config_key"] == "checkerframework.tasks"

    def test_custom_name(self, temp_dir: Path) -> None:
        loader = self._loader(temp_dir, "cf:\n  tasks: [compileJava]\n")
        assert loader.extension_block("cf") == {"tasks": ["compileJava"]}
