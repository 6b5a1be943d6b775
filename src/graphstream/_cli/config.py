"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in graphstream configuration."""


@dataclass(slots=True, frozen=True)
class GraphstreamConfig:
    """Configuration loaded from the [tool.graphstream] section of pyproject.toml.

    Attributes:
        undirected: Build undirected graphs from the command line edges.
        separator: Separator between source and target in an edge argument.
        project_root: Directory containing the pyproject.toml the config came from.

    """

    undirected: bool = False
    separator: str = "-"
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> GraphstreamConfig:
    """Load and validate [tool.graphstream] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphstreamConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("graphstream", {})

    if not section:
        return GraphstreamConfig(project_root=project_root)

    unknown = sorted(set(section) - {"undirected", "separator"})
    if unknown:
        msg = f"Unknown [tool.graphstream] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    undirected = section.get("undirected", False)
    if not isinstance(undirected, bool):
        msg = "Invalid [tool.graphstream].undirected: expected boolean"
        raise ConfigError(msg)

    separator = section.get("separator", "-")
    if not isinstance(separator, str) or not separator:
        msg = "Invalid [tool.graphstream].separator: expected non-empty string"
        raise ConfigError(msg)

    return GraphstreamConfig(
        undirected=undirected,
        separator=separator,
        project_root=project_root,
    )


def get_config() -> GraphstreamConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphstreamConfig (defaults if no pyproject.toml or no [tool.graphstream] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphstreamConfig()
    return load_config(pyproject_path)
