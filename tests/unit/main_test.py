from typer.testing import CliRunner

from gridsearch.exceptions import InvalidGridError
from gridsearch.main import app
from gridsearch.world.grid import Grid

runner = CliRunner()


def test_run_default_grid():
    result = runner.invoke(app, ["run", "--algorithm", "bfs"])
    assert result.exit_code == 0
    assert "path_length=31" in result.output
    assert "S*****" in result.output


def test_run_unreachable(tmp_path):
    config = tmp_path / "grid.yaml"
    config.write_text("layout:\n  - 'S#E'\n")
    result = runner.invoke(app, ["run", "--config", str(config), "--algorithm", "dfs"])
    assert result.exit_code == 0
    assert "No path found." in result.output


def test_run_unknown_algorithm():
    result = runner.invoke(app, ["run", "--algorithm", "greedy"])
    assert result.exit_code != 0


def test_compare():
    result = runner.invoke(app, ["compare", "--random-walls", "0.2", "--seed", "5"])
    assert result.exit_code == 0
    for name in ("astar", "dijkstra", "bfs", "dfs"):
        assert name in result.output


def test_gen_map(tmp_path):
    out = tmp_path / "grid.yaml"
    result = runner.invoke(
        app, ["gen-map", "--out", str(out), "--rows", "10", "--cols", "16", "--seed", "2"]
    )
    assert result.exit_code == 0
    grid = Grid.load_from_yaml(str(out))
    assert (grid.rows, grid.cols) == (10, 16)
    assert grid.start == (5, 2)
    assert grid.end == (5, 14)
    assert len(grid.wall_cells()) > 0


def test_gen_map_rejects_single_column(tmp_path):
    out = tmp_path / "grid.yaml"
    result = runner.invoke(app, ["gen-map", "--out", str(out), "--cols", "1"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, InvalidGridError)
    assert not out.exists()


def test_gen_map_two_columns(tmp_path):
    out = tmp_path / "grid.yaml"
    result = runner.invoke(
        app, ["gen-map", "--out", str(out), "--rows", "1", "--cols", "2", "--density", "0"]
    )
    assert result.exit_code == 0
    grid = Grid.load_from_yaml(str(out))
    assert grid.start == (0, 0)
    assert grid.end == (0, 1)
