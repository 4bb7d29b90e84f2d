"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from scheduler._demo import DEMO_EDGES, DEMO_VERTICES
from scheduler._graph import Edge, Vertex


class ConfigError(Exception):
    """Error in scheduler configuration."""


class OutputFormat(StrEnum):
    """How a schedule is printed."""

    PLAIN = "plain"
    JSON = "json"


@dataclass(slots=True, frozen=True)
class SchedulerConfig:
    """Configuration loaded from the [tool.scheduler] table of pyproject.toml."""

    vertices: tuple[Vertex, ...] = DEMO_VERTICES
    edges: tuple[Edge, ...] = DEMO_EDGES
    format: OutputFormat = OutputFormat.PLAIN
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
            return None
        current = parent


def _is_vertex(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _parse_vertices(value: object) -> tuple[Vertex, ...]:
    if not isinstance(value, list) or not all(_is_vertex(v) for v in value):
        msg = "Invalid [tool.scheduler].vertices: expected a list of non-negative integers"
        raise ConfigError(msg)
    return tuple(value)


def _parse_edges(value: object) -> tuple[Edge, ...]:
    if not isinstance(value, list):
        msg = "Invalid [tool.scheduler].edges: expected a list of [source, destination] pairs"
        raise ConfigError(msg)

    edges: list[Edge] = []
    for item in value:
        if not isinstance(item, list) or len(item) != 2 or not all(_is_vertex(v) for v in item):  # noqa: PLR2004
            msg = f"Invalid edge {item!r} in [tool.scheduler].edges: expected [source, destination]"
            raise ConfigError(msg)
        edges.append((item[0], item[1]))
    return tuple(edges)


def _parse_format(value: object) -> OutputFormat:
    try:
        return OutputFormat(value)
    except ValueError as e:
        choices = ", ".join(f"'{f}'" for f in OutputFormat)
        msg = f"Invalid [tool.scheduler].format {value!r}: expected one of {choices}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> SchedulerConfig:
    """Load and validate [tool.scheduler] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed SchedulerConfig

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

    section = data.get("tool", {}).get("scheduler", {})

    if not section:
        return SchedulerConfig(project_root=project_root)

    if "edges" in section and "vertices" not in section:
        msg = "[tool.scheduler].edges requires [tool.scheduler].vertices"
        raise ConfigError(msg)

    # A configured vertex set replaces the demo graph entirely
    vertices, edges = DEMO_VERTICES, DEMO_EDGES
    if "vertices" in section:
        vertices = _parse_vertices(section["vertices"])
        edges = _parse_edges(section["edges"]) if "edges" in section else ()
    output_format = _parse_format(section["format"]) if "format" in section else OutputFormat.PLAIN

    return SchedulerConfig(
        vertices=vertices,
        edges=edges,
        format=output_format,
        project_root=project_root,
    )


def get_config() -> SchedulerConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        SchedulerConfig (the defaults if no pyproject.toml or no [tool.scheduler] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return SchedulerConfig()
    return load_config(pyproject_path)
