"""Tests for the configuration module."""

from pathlib import Path

import pytest

from scheduler._cli.config import (
    ConfigError,
    OutputFormat,
    SchedulerConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)
from scheduler._demo import DEMO_EDGES, DEMO_VERTICES


def _write_pyproject(tmp_path: Path, content: str) -> Path:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = _write_pyproject(tmp_path, "[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = _write_pyproject(tmp_path, "[project]\nname = 'test'\n")
        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for loading [tool.scheduler]."""

    def test_no_section_returns_defaults(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, "[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config.vertices == DEMO_VERTICES
        assert config.edges == DEMO_EDGES
        assert config.format is OutputFormat.PLAIN
        assert config.project_root == tmp_path

    def test_full_section(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(
            tmp_path,
            """
[tool.scheduler]
vertices = [1, 2, 3]
edges = [[1, 2], [2, 3]]
format = "json"
""",
        )

        config = load_config(pyproject)

        assert config == SchedulerConfig(
            vertices=(1, 2, 3),
            edges=((1, 2), (2, 3)),
            format=OutputFormat.JSON,
            project_root=tmp_path,
        )

    def test_vertices_without_edges(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, "[tool.scheduler]\nvertices = [4, 5]\n")

        config = load_config(pyproject)

        assert config.vertices == (4, 5)
        assert config.edges == ()

    def test_format_only_keeps_demo_graph(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, '[tool.scheduler]\nformat = "json"\n')

        config = load_config(pyproject)

        assert config.vertices == DEMO_VERTICES
        assert config.edges == DEMO_EDGES
        assert config.format is OutputFormat.JSON

    def test_edges_without_vertices_raises_error(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, "[tool.scheduler]\nedges = [[1, 2]]\n")

        with pytest.raises(ConfigError, match="requires"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ["[-1]", '["a"]', "3", "[true]"])
    def test_invalid_vertices_raises_error(self, tmp_path: Path, value: str) -> None:
        pyproject = _write_pyproject(tmp_path, f"[tool.scheduler]\nvertices = {value}\n")

        with pytest.raises(ConfigError, match="vertices"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ["[[1]]", "[[1, 2, 3]]", "[[1, -2]]", "[1, 2]", '"1:2"'])
    def test_invalid_edges_raises_error(self, tmp_path: Path, value: str) -> None:
        pyproject = _write_pyproject(tmp_path, f"[tool.scheduler]\nvertices = [1, 2]\nedges = {value}\n")

        with pytest.raises(ConfigError, match="edge"):
            load_config(pyproject)

    def test_invalid_format_raises_error(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, '[tool.scheduler]\nformat = "yaml"\n')

        with pytest.raises(ConfigError, match="format"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = _write_pyproject(tmp_path, "[tool.scheduler\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_pyproject(tmp_path, "[tool.scheduler]\nvertices = [1]\n")
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.vertices == (1,)
        assert config.project_root == tmp_path.resolve()
