"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in adjgraph configuration."""


@dataclass(slots=True, frozen=True)
class AdjgraphConfig:
    """Configuration loaded from the ``[tool.adjgraph]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    start: int | None = None
    undirected: bool = False
    weights: bool = True
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


def _get_bool(section: dict[str, object], key: str, *, default: bool) -> bool:
    if key not in section:
        return default
    value = section[key]
    if not isinstance(value, bool):
        msg = f"Invalid [tool.adjgraph].{key}: expected boolean"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> AdjgraphConfig:
    """Load and validate [tool.adjgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed AdjgraphConfig

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

    section = data.get("tool", {}).get("adjgraph", {})
    if not section:
        return AdjgraphConfig(project_root=project_root)
    if not isinstance(section, dict):
        msg = "Invalid [tool.adjgraph] configuration: expected a table"
        raise ConfigError(msg)

    graph_path: Path | None = None
    if "graph" in section:
        graph_value = section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.adjgraph].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    start: int | None = None
    if "start" in section:
        start_value = section["start"]
        # bool is a subclass of int
        if isinstance(start_value, bool) or not isinstance(start_value, int) or start_value < 0:
            msg = "Invalid [tool.adjgraph].start: expected non-negative integer"
            raise ConfigError(msg)
        start = start_value

    return AdjgraphConfig(
        graph=graph_path,
        start=start,
        undirected=_get_bool(section, "undirected", default=False),
        weights=_get_bool(section, "weights", default=True),
        project_root=project_root,
    )


def get_config() -> AdjgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        AdjgraphConfig (may be empty if no pyproject.toml or no [tool.adjgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return AdjgraphConfig()
    return load_config(pyproject_path)
