import json
import logging
import typing as t
from datetime import datetime

from gridsearch.data_models import GridCellModel

# Up, down, left, right. The order is the expansion order of every search.
TAXI_NEIGHBORHOOD = ((-1, 0), (1, 0), (0, -1), (0, 1))
TAXI_NEIGHBORHOOD_SET = set(TAXI_NEIGHBORHOOD)


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class GridSearchLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp if timestamp is not None else timestamp_string()

    def __str__(self):
        return "At run {}: '{}'".format(self.step, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class GridSearchLogger(list[GridSearchLog]):
    def __init__(
        self, printout: bool = True, std_logger: logging.Logger | None = None
    ):
        super(GridSearchLogger, self).__init__()
        self.printout = printout
        self.std_logger = std_logger

    def append(self, log: GridSearchLog):
        super(GridSearchLogger, self).append(log)
        if self.printout:
            print(log)
        if self.std_logger:
            self.std_logger.info(f"[gridsearch]:[run={log.step}]: {log.message}")


def manhattan_distance(a: t.Sequence[int], b: t.Sequence[int]) -> int:
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def is_in_matrix(cell: t.Sequence[int], rows: int, cols: int) -> bool:
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols


def are_adjacent(a: GridCellModel, b: GridCellModel) -> bool:
    return (b[0] - a[0], b[1] - a[1]) in TAXI_NEIGHBORHOOD_SET


def get_neighbors(
    cell: GridCellModel,
    rows: int,
    cols: int,
    neighborhood: t.Sequence[GridCellModel] = TAXI_NEIGHBORHOOD,
) -> t.List[GridCellModel]:
    neighbors = []
    for i, j in neighborhood:
        neighbor = cell[0] + i, cell[1] + j
        if is_in_matrix(neighbor, rows, cols):
            neighbors.append(neighbor)
    return neighbors
