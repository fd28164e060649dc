import os
import typing as t
from enum import Enum

import yaml
from pydantic import BaseModel, Field

from gridsearch import config
from gridsearch.exceptions import UnknownAlgorithmError

GridCellModel = t.Tuple[int, int]
GridCellSet = t.Set[GridCellModel]
Neighborhood = t.Sequence[GridCellModel]


class SearchAlgorithm(str, Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    BFS = "bfs"
    DFS = "dfs"

    @classmethod
    def parse(cls, kind: t.Union["SearchAlgorithm", str]) -> "SearchAlgorithm":
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.strip().lower())
            except ValueError:
                pass
        raise UnknownAlgorithmError(kind)


class GridConfigModel(BaseModel):
    rows: int = Field(default=config.DEFAULT_ROWS, gt=0)
    cols: int = Field(default=config.DEFAULT_COLS, gt=0)
    start: GridCellModel = config.DEFAULT_START
    end: GridCellModel = config.DEFAULT_END
    walls: t.List[GridCellModel] = []

    layout: t.List[str] | None = None
    """ASCII rows ('#' wall, '.' free, 'S' start, 'E' end). Overrides rows, cols, start, end and walls."""

    image: str | None = None
    """Grayscale map image, one pixel per cell. Overrides rows, cols and walls."""

    free_threshold: int = Field(default=config.DEFAULT_FREE_THRESHOLD, ge=0, le=255)
    negate: bool = False

    wall_density: float | None = Field(default=None, ge=0.0, le=1.0)
    """When set, walls are drawn at random with this probability instead."""

    seed: int | None = None


def grid_config_from_yaml(file_path: str) -> GridConfigModel:
    with open(file_path, "r") as stream:
        data = yaml.safe_load(stream) or {}
    grid_config = GridConfigModel(**data)
    if grid_config.image is not None and not os.path.isabs(grid_config.image):
        grid_config.image = os.path.join(
            os.path.dirname(os.path.abspath(file_path)), grid_config.image
        )
    return grid_config


class RunStats(BaseModel):
    nodes_visited: int = 0
    """Number of cells the algorithm marked visited"""

    path_length: int = 0
    """Number of cells in the path, start and end included. 0 when no path exists.
    """

    time_ms: float = 0.0
    """Wall time spent in search and path reconstruction, in milliseconds.
    """


class SearchResult(BaseModel):
    algorithm: SearchAlgorithm
    visitation_order: t.List[GridCellModel] = []
    path: t.List[GridCellModel] = []
    stats: RunStats = RunStats()

    @property
    def path_found(self) -> bool:
        return len(self.path) > 0
