import numpy as np
import pytest

from gridsearch.data_models import SearchAlgorithm
from gridsearch.exceptions import UnknownAlgorithmError
from gridsearch.runner import ALGORITHMS, SearchRunner, run_search
from gridsearch.utils.utils import GridSearchLogger
from gridsearch.world.grid import Grid


class TestRunSearch:
    def setup_method(self):
        self.grid = Grid()
        self.grid.generate_random_walls(density=0.2, seed=3)

    def test_dispatch_covers_every_algorithm(self):
        assert set(ALGORITHMS) == set(SearchAlgorithm)

    def test_accepts_strings(self):
        assert run_search(self.grid, "bfs").algorithm == SearchAlgorithm.BFS
        assert run_search(self.grid, " AStar ").algorithm == SearchAlgorithm.ASTAR

    def test_unknown_algorithm(self):
        walls = self.grid.walls.copy()
        logger = GridSearchLogger(printout=False)
        with pytest.raises(UnknownAlgorithmError):
            run_search(self.grid, "greedy", logger=logger)
        with pytest.raises(UnknownAlgorithmError):
            run_search(self.grid, 3)  # type: ignore
        assert np.array_equal(walls, self.grid.walls)
        assert len(logger) == 0

    def test_grid_is_not_modified(self):
        walls = self.grid.walls.copy()
        run_search(self.grid, SearchAlgorithm.DFS)
        assert np.array_equal(walls, self.grid.walls)

    @pytest.mark.parametrize("kind", list(SearchAlgorithm))
    def test_runs_are_reproducible(self, kind):
        first = run_search(self.grid, kind)
        second = run_search(self.grid, kind)
        assert first.visitation_order == second.visitation_order
        assert first.path == second.path

    def test_logs_outcome(self):
        logger = GridSearchLogger(printout=False)
        run_search(Grid(), SearchAlgorithm.BFS, logger=logger, step=4)
        assert len(logger) == 2
        assert all(log.step == 4 for log in logger)
        assert "path of 31 cells" in logger[1].message

    def test_logs_unreachable(self):
        grid = Grid.from_ascii(["S#E"])
        logger = GridSearchLogger(printout=False)
        result = run_search(grid, SearchAlgorithm.ASTAR, logger=logger)
        assert not result.path_found
        assert result.stats.path_length == 0
        assert "unreachable" in logger[-1].message


class TestSearchRunner:
    def test_edit_between_runs(self):
        runner = SearchRunner(Grid(rows=1, cols=3, start=(0, 0), end=(0, 2)))
        assert runner.run(SearchAlgorithm.BFS).path == [(0, 0), (0, 1), (0, 2)]

        runner.grid.toggle_wall((0, 1))
        result = runner.run(SearchAlgorithm.BFS)
        assert result.path == []
        assert result.visitation_order == [(0, 0)]
        assert runner.last_result is result
        assert runner.run_count == 2

    def test_run_all(self):
        runner = SearchRunner(Grid())
        results = runner.run_all()
        assert list(results) == list(SearchAlgorithm)
        assert all(len(r.path) == 31 for r in results.values())
        assert runner.run_count == 4
        assert len(runner.logger) == 8
        assert [log.step for log in runner.logger] == [0, 0, 1, 1, 2, 2, 3, 3]
