import typing as t

import numpy as np
import numpy.typing as npt
from PIL import Image
from typing_extensions import Self

from gridsearch import config
from gridsearch.data_models import (
    GridCellModel,
    GridCellSet,
    GridConfigModel,
    Neighborhood,
    grid_config_from_yaml,
)
from gridsearch.exceptions import (
    CellOutOfBoundsError,
    InvalidGridError,
    InvalidWallPlacementError,
)
from gridsearch.utils import utils

WALL_CHAR = "#"
FREE_CHAR = "."
START_CHAR = "S"
END_CHAR = "E"
VISITED_CHAR = "o"
PATH_CHAR = "*"


class Grid:
    """Fixed-size grid of cells with a single start and end cell.

    Walls are the only mutable state and must only be edited between runs.
    Searches never touch a Grid directly: they work on a SearchGrid snapshot.
    """

    def __init__(
        self,
        *,
        rows: int = config.DEFAULT_ROWS,
        cols: int = config.DEFAULT_COLS,
        start: GridCellModel = config.DEFAULT_START,
        end: GridCellModel = config.DEFAULT_END,
        walls: npt.NDArray[np.bool_] | None = None,
        neighborhood: Neighborhood = utils.TAXI_NEIGHBORHOOD,
    ):
        if rows <= 0 or cols <= 0:
            raise InvalidGridError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols

        start = (int(start[0]), int(start[1]))
        end = (int(end[0]), int(end[1]))
        for cell in (start, end):
            if not utils.is_in_matrix(cell, rows, cols):
                raise CellOutOfBoundsError(cell, rows, cols)
        if start == end:
            raise InvalidGridError(f"Start and end must differ, both are {start}")
        self.start = start
        self.end = end

        self.neighborhood: t.Tuple[GridCellModel, ...] = tuple(
            (int(i), int(j)) for i, j in neighborhood
        )
        if (
            len(self.neighborhood) != 4
            or set(self.neighborhood) != utils.TAXI_NEIGHBORHOOD_SET
        ):
            raise InvalidGridError(
                "The neighborhood must be an ordering of the four taxi moves"
            )

        if walls is not None:
            self.set_walls(walls)
        else:
            self.walls = np.zeros((rows, cols), dtype=np.bool_)

    def set_walls(self, walls: npt.NDArray[np.bool_]):
        walls = np.asarray(walls, dtype=np.bool_)
        if walls.shape != (self.rows, self.cols):
            raise InvalidGridError(
                f"Wall array has shape {walls.shape}, expected {(self.rows, self.cols)}"
            )
        for cell in (self.start, self.end):
            if walls[cell[0]][cell[1]]:
                raise InvalidWallPlacementError(cell)
        self.walls = walls.copy()

    def is_cell_in_bounds(self, cell: GridCellModel) -> bool:
        return utils.is_in_matrix(cell, self.rows, self.cols)

    def check_in_bounds(self, cell: GridCellModel):
        if not self.is_cell_in_bounds(cell):
            raise CellOutOfBoundsError(cell, self.rows, self.cols)

    def is_start(self, cell: GridCellModel) -> bool:
        return tuple(cell) == self.start

    def is_end(self, cell: GridCellModel) -> bool:
        return tuple(cell) == self.end

    def is_wall(self, cell: GridCellModel) -> bool:
        self.check_in_bounds(cell)
        return bool(self.walls[cell[0]][cell[1]])

    def neighbors(self, cell: GridCellModel) -> t.List[GridCellModel]:
        """In-bounds, non-wall neighbors of `cell`, in the order of the grid neighborhood."""
        return [
            n
            for n in utils.get_neighbors(cell, self.rows, self.cols, self.neighborhood)
            if not self.walls[n[0]][n[1]]
        ]

    def wall_cells(self) -> GridCellSet:
        rows, cols = np.where(self.walls)
        return set((int(r), int(c)) for r, c in zip(rows, cols))

    # Editing, only legal between runs

    def set_wall(self, cell: GridCellModel, is_wall: bool = True):
        self.check_in_bounds(cell)
        if self.is_start(cell) or self.is_end(cell):
            raise InvalidWallPlacementError(cell)
        self.walls[cell[0]][cell[1]] = is_wall

    def toggle_wall(self, cell: GridCellModel) -> bool:
        """Flips the wall state of a cell. Start and end cells are left untouched.

        :return: True if the cell changed
        """
        self.check_in_bounds(cell)
        if self.is_start(cell) or self.is_end(cell):
            return False
        self.walls[cell[0]][cell[1]] = not self.walls[cell[0]][cell[1]]
        return True

    def clear_walls(self):
        self.walls = np.zeros((self.rows, self.cols), dtype=np.bool_)

    def generate_random_walls(
        self, density: float = config.DEFAULT_WALL_DENSITY, seed: int | None = None
    ):
        """Replaces the current walls with random ones, each cell being a wall with probability `density`."""
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Wall density must be within [0, 1], got {density}")
        rng = np.random.default_rng(seed)
        walls = rng.random((self.rows, self.cols)) < density
        walls[self.start[0]][self.start[1]] = False
        walls[self.end[0]][self.end[1]] = False
        self.walls = walls

    def copy(self) -> "Grid":
        return Grid(
            rows=self.rows,
            cols=self.cols,
            start=self.start,
            end=self.end,
            walls=self.walls,
            neighborhood=self.neighborhood,
        )

    # Loading and rendering

    def to_ascii(
        self,
        visited: t.Iterable[GridCellModel] = (),
        path: t.Iterable[GridCellModel] = (),
    ) -> t.List[str]:
        chars = np.where(self.walls, WALL_CHAR, FREE_CHAR).astype(object)
        for r, c in visited:
            chars[r][c] = VISITED_CHAR
        for r, c in path:
            chars[r][c] = PATH_CHAR
        chars[self.start[0]][self.start[1]] = START_CHAR
        chars[self.end[0]][self.end[1]] = END_CHAR
        return ["".join(row) for row in chars]

    def print_grid(self):
        for line in self.to_ascii():
            print(line)

    @classmethod
    def from_ascii(
        cls, lines: t.Sequence[str], neighborhood: Neighborhood = utils.TAXI_NEIGHBORHOOD
    ) -> Self:
        lines = [line.rstrip("\n") for line in lines if line.strip()]
        if not lines:
            raise InvalidGridError("Empty grid layout")
        cols = len(lines[0])
        if any(len(line) != cols for line in lines):
            raise InvalidGridError("All layout rows must have the same length")

        walls = np.zeros((len(lines), cols), dtype=np.bool_)
        starts: t.List[GridCellModel] = []
        ends: t.List[GridCellModel] = []
        for r, line in enumerate(lines):
            for c, char in enumerate(line):
                if char == WALL_CHAR:
                    walls[r][c] = True
                elif char == START_CHAR:
                    starts.append((r, c))
                elif char == END_CHAR:
                    ends.append((r, c))
                elif char != FREE_CHAR:
                    raise InvalidGridError(f"Unexpected character {char!r} at {(r, c)}")

        if len(starts) != 1 or len(ends) != 1:
            raise InvalidGridError(
                f"Layout needs exactly one '{START_CHAR}' and one '{END_CHAR}', "
                f"found {len(starts)} and {len(ends)}"
            )
        return cls(
            rows=len(lines),
            cols=cols,
            start=starts[0],
            end=ends[0],
            walls=walls,
            neighborhood=neighborhood,
        )

    @staticmethod
    def walls_from_image(
        image_path: str,
        free_threshold: int = config.DEFAULT_FREE_THRESHOLD,
        negate: bool = False,
    ) -> npt.NDArray[np.bool_]:
        """Reads a map image, one pixel per cell. Dark pixels are walls."""
        map_image = Image.open(image_path)
        map_image = map_image.convert("L")  # Convert to grayscale
        pixels = np.array(map_image)
        walls = pixels <= free_threshold
        if negate:
            walls = np.logical_not(walls)
        return walls

    @classmethod
    def from_config(cls, grid_config: GridConfigModel) -> Self:
        if grid_config.layout is not None:
            grid = cls.from_ascii(grid_config.layout)
        elif grid_config.image is not None:
            walls = cls.walls_from_image(
                grid_config.image,
                free_threshold=grid_config.free_threshold,
                negate=grid_config.negate,
            )
            grid = cls(
                rows=walls.shape[0],
                cols=walls.shape[1],
                start=grid_config.start,
                end=grid_config.end,
                walls=walls,
            )
        else:
            grid = cls(
                rows=grid_config.rows,
                cols=grid_config.cols,
                start=grid_config.start,
                end=grid_config.end,
            )
            for cell in grid_config.walls:
                grid.set_wall(cell)

        if grid_config.wall_density is not None:
            grid.generate_random_walls(grid_config.wall_density, seed=grid_config.seed)
        return grid

    @classmethod
    def load_from_yaml(cls, yaml_file: str) -> Self:
        return cls.from_config(grid_config_from_yaml(yaml_file))

    def to_config(self) -> GridConfigModel:
        return GridConfigModel(
            rows=self.rows,
            cols=self.cols,
            start=self.start,
            end=self.end,
            walls=sorted(self.wall_cells()),
        )
