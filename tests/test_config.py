"""Tests for the configuration module."""

from pathlib import Path

import pytest

from adjgraph._cli.config import (
    AdjgraphConfig,
    ConfigError,
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

        subdir = tmp_path / "graphs" / "nested"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading [tool.adjgraph]."""

    def test_full_config(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.adjgraph]
graph = "graphs/roads.txt"
start = 3
undirected = true
weights = false
""",
        )

        config = load_config(pyproject)

        assert config == AdjgraphConfig(
            graph=tmp_path / "graphs" / "roads.txt",
            start=3,
            undirected=True,
            weights=False,
            project_root=tmp_path,
        )

    def test_absolute_graph_path_is_kept(self, tmp_path: Path) -> None:
        graph_path = tmp_path / "elsewhere" / "g.txt"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.adjgraph]\ngraph = "{graph_path.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == graph_path

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == AdjgraphConfig(project_root=tmp_path)
        assert config.weights is True
        assert config.undirected is False

    @pytest.mark.parametrize(
        ("body", "match"),
        [
            ("graph = 3", "graph"),
            ('start = "zero"', "start"),
            ("start = -1", "start"),
            ("start = true", "start"),
            ('undirected = "yes"', "undirected"),
            ("weights = 1", "weights"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, body: str, match: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.adjgraph]\n{body}\n")

        with pytest.raises(ConfigError, match=match):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.adjgraph\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config function."""

    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.adjgraph]\nstart = 2\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().start == 2
