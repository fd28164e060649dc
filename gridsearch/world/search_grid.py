import typing as t

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from gridsearch.data_models import GridCellModel
from gridsearch.world.grid import Grid

UNREACHED = int(np.iinfo(np.int64).max)
NO_PREVIOUS = -1


class SearchGrid:
    """
    Working copy of a Grid, owned by a single search run.

    Cell state lives in flat arrays indexed by `row * cols + col`. Back-pointers
    are indices into these arrays, so two runs can never alias each other's cells.
    """

    def __init__(
        self,
        *,
        rows: int,
        cols: int,
        start: GridCellModel,
        end: GridCellModel,
        walls: npt.NDArray[np.bool_],
        neighborhood: t.Sequence[GridCellModel],
    ):
        self.rows = rows
        self.cols = cols
        self.size = rows * cols
        self.walls = np.array(walls, dtype=np.bool_).reshape(self.size)
        self.neighborhood = tuple(neighborhood)
        self.start = self.index(start)
        self.end = self.index(end)

        self.distance = np.full(self.size, UNREACHED, dtype=np.int64)
        self.visited = np.zeros(self.size, dtype=np.bool_)
        self.previous = np.full(self.size, NO_PREVIOUS, dtype=np.int64)

    @classmethod
    def from_grid(cls, grid: Grid) -> Self:
        return cls(
            rows=grid.rows,
            cols=grid.cols,
            start=grid.start,
            end=grid.end,
            walls=grid.walls,
            neighborhood=grid.neighborhood,
        )

    @property
    def max_iterations(self) -> int:
        return self.size

    def index(self, cell: GridCellModel) -> int:
        return int(cell[0]) * self.cols + int(cell[1])

    def cell(self, index: int) -> GridCellModel:
        return divmod(int(index), self.cols)  # type: ignore

    def cells(self, indices: t.Iterable[int]) -> t.List[GridCellModel]:
        return [self.cell(i) for i in indices]

    def is_wall(self, index: int) -> bool:
        return bool(self.walls[index])

    def is_reached(self, index: int) -> bool:
        return int(self.distance[index]) != UNREACHED

    def neighbors(self, index: int) -> t.List[int]:
        r, c = divmod(int(index), self.cols)
        result: t.List[int] = []
        for i, j in self.neighborhood:
            nr, nc = r + i, c + j
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                n = nr * self.cols + nc
                if not self.walls[n]:
                    result.append(n)
        return result
