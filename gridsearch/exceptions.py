import typing as t


class GridSearchError(Exception):
    pass


class UnknownAlgorithmError(GridSearchError):
    def __init__(self, kind: t.Any, *args: object):
        super().__init__(f"Unknown search algorithm: {kind!r}", *args)
        self.kind = kind


class InvalidGridError(GridSearchError):
    pass


class CellOutOfBoundsError(InvalidGridError):
    def __init__(self, cell: t.Tuple[int, int], rows: int, cols: int, *args: object):
        super().__init__(
            f"Cell {tuple(cell)} is outside of the {rows}x{cols} grid", *args
        )
        self.cell = cell


class InvalidWallPlacementError(GridSearchError):
    def __init__(self, cell: t.Tuple[int, int], *args: object):
        super().__init__(f"Cell {tuple(cell)} is the start or end cell", *args)
        self.cell = cell


class SearchIterationLimitError(GridSearchError):
    """
    Raised when a search loop pops more fresh cells than the grid holds.
    This can only happen if the per-run arena got corrupted.
    """

    def __init__(self, limit: int, *args: object):
        super().__init__(f"Search exceeded its iteration bound of {limit}", *args)
        self.limit = limit
