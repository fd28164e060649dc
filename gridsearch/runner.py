import time
import typing as t

from gridsearch.algorithms import graph_search
from gridsearch.data_models import RunStats, SearchAlgorithm, SearchResult
from gridsearch.utils import utils
from gridsearch.world.grid import Grid
from gridsearch.world.search_grid import SearchGrid

ALGORITHMS: t.Dict[SearchAlgorithm, graph_search.SearchFunction] = {
    SearchAlgorithm.ASTAR: graph_search.a_star,
    SearchAlgorithm.DIJKSTRA: graph_search.dijkstra,
    SearchAlgorithm.BFS: graph_search.breadth_first_search,
    SearchAlgorithm.DFS: graph_search.depth_first_search,
}


def run_search(
    grid: Grid,
    algorithm: t.Union[SearchAlgorithm, str],
    logger: utils.GridSearchLogger | None = None,
    step: int = 0,
) -> SearchResult:
    """
    Runs one search on a fresh working copy of `grid`.

    The algorithm is resolved before any state is created, so an unknown kind
    raises `UnknownAlgorithmError` without side effects. The grid itself is
    never modified.
    """
    kind = SearchAlgorithm.parse(algorithm)
    search = ALGORITHMS[kind]

    if logger is not None:
        logger.append(
            utils.GridSearchLog(
                f"Running {kind.value} on a {grid.rows}x{grid.cols} grid "
                f"from {grid.start} to {grid.end}.",
                step,
            )
        )

    start_time = time.perf_counter()
    search_grid = SearchGrid.from_grid(grid)
    visited = search(search_grid, search_grid.start, search_grid.end)
    path = graph_search.reconstruct_path(search_grid, search_grid.end)
    elapsed_ms = (time.perf_counter() - start_time) * 1000.0

    result = SearchResult(
        algorithm=kind,
        visitation_order=search_grid.cells(visited),
        path=search_grid.cells(path),
        stats=RunStats(
            nodes_visited=len(visited), path_length=len(path), time_ms=elapsed_ms
        ),
    )

    if logger is not None:
        if result.path_found:
            message = (
                f"{kind.value} found a path of {result.stats.path_length} cells "
                f"after visiting {result.stats.nodes_visited} cells."
            )
        else:
            message = (
                f"{kind.value} found no path, end cell {grid.end} is unreachable "
                f"({result.stats.nodes_visited} cells visited)."
            )
        logger.append(utils.GridSearchLog(message, step))

    return result


class SearchRunner:
    """Runs searches on a grid whose walls may be edited between runs."""

    def __init__(self, grid: Grid, logger: utils.GridSearchLogger | None = None):
        self.grid = grid
        self.logger = logger if logger is not None else utils.GridSearchLogger(printout=False)
        self.run_count = 0
        self.last_result: SearchResult | None = None

    def run(self, algorithm: t.Union[SearchAlgorithm, str]) -> SearchResult:
        result = run_search(self.grid, algorithm, logger=self.logger, step=self.run_count)
        self.run_count += 1
        self.last_result = result
        return result

    def run_all(self) -> t.Dict[SearchAlgorithm, SearchResult]:
        return {kind: self.run(kind) for kind in SearchAlgorithm}
