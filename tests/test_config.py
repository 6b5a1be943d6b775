"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graphstream._cli.config import (
    ConfigError,
    GraphstreamConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for loading the [tool.graphstream] section."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        """Should parse every key."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstream]
undirected = true
separator = "->"
""",
        )

        config = load_config(pyproject)

        assert config.undirected is True
        assert config.separator == "->"
        assert config.project_root == tmp_path

    def test_partial_configuration_keeps_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults for missing keys."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstream]
separator = ","
""",
        )

        config = load_config(pyproject)

        assert config.undirected is False
        assert config.separator == ","


class TestLoadConfigEmptySection:
    """Tests for empty or missing configuration."""

    def test_no_tool_graphstream_section(self, tmp_path: Path) -> None:
        """Should return defaults when no [tool.graphstream] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[project]
name = "test"
""",
        )

        config = load_config(pyproject)

        assert config.undirected is False
        assert config.separator == "-"
        assert config.project_root == tmp_path

    def test_empty_tool_graphstream_section(self, tmp_path: Path) -> None:
        """Should return defaults when [tool.graphstream] is empty."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstream]
""",
        )

        config = load_config(pyproject)

        assert config == GraphstreamConfig(project_root=tmp_path)


class TestLoadConfigErrors:
    """Tests for configuration error handling."""

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for invalid TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("invalid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_unknown_key_raises_error(self, tmp_path: Path) -> None:
        """Should reject keys it does not know."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstream]
directed = false
""",
        )

        with pytest.raises(ConfigError, match="Unknown .* keys: directed"):
            load_config(pyproject)

    def test_invalid_undirected_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when undirected is not a boolean."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstream]
undirected = "yes"
""",
        )

        with pytest.raises(ConfigError, match="expected boolean"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ['""', "1"])
    def test_invalid_separator_raises_error(self, tmp_path: Path, value: str) -> None:
        """Should raise ConfigError when separator is empty or not a string."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.graphstream]\nseparator = {value}\n")

        with pytest.raises(ConfigError, match="expected non-empty string"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should find the configuration from a subdirectory of the project."""
        (tmp_path / "pyproject.toml").write_text("[tool.graphstream]\nundirected = true\n")
        subdir = tmp_path / "data"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        config = get_config()

        assert config.undirected is True
        assert config.project_root == tmp_path.resolve()


class TestGraphstreamConfigDataclass:
    """Tests for the GraphstreamConfig dataclass."""

    def test_default_values(self) -> None:
        """Should default to directed graphs and '-' as separator."""
        config = GraphstreamConfig()

        assert config.undirected is False
        assert config.separator == "-"
        assert config.project_root is None

    def test_frozen(self) -> None:
        """Should be frozen (immutable)."""
        config = GraphstreamConfig()

        with pytest.raises(AttributeError):
            config.undirected = True  # type: ignore[misc]
