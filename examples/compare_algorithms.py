from gridsearch.data_models import SearchAlgorithm
from gridsearch.runner import SearchRunner
from gridsearch.world.grid import Grid


grid = Grid.load_from_yaml("examples/grids/two_rooms.yaml")
runner = SearchRunner(grid)
results = runner.run_all()
for kind in (SearchAlgorithm.ASTAR, SearchAlgorithm.DIJKSTRA, SearchAlgorithm.BFS):
    assert len(results[kind].path) == len(results[SearchAlgorithm.BFS].path)
assert len(results[SearchAlgorithm.DFS].path) >= len(results[SearchAlgorithm.BFS].path)

grid.set_wall((4, 10))
assert runner.run(SearchAlgorithm.ASTAR).path_found is False
print("\n".join(grid.to_ascii(visited=runner.last_result.visitation_order)))
