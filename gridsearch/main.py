import typing as t

import typer
import yaml

from gridsearch import config
from gridsearch.data_models import SearchAlgorithm, SearchResult
from gridsearch.playback import PlaybackFrame, VISIT_PHASE, play
from gridsearch.runner import SearchRunner
from gridsearch.utils.utils import GridSearchLogger
from gridsearch.world.grid import Grid

app = typer.Typer()


def load_grid(
    config_file: t.Optional[str], random_walls: t.Optional[float], seed: t.Optional[int]
) -> Grid:
    grid = Grid.load_from_yaml(config_file) if config_file else Grid()
    if random_walls is not None:
        grid.generate_random_walls(density=random_walls, seed=seed)
    return grid


def format_stats(result: SearchResult) -> str:
    stats = result.stats
    return (
        f"{result.algorithm.value:<9} visited={stats.nodes_visited:<5} "
        f"path_length={stats.path_length:<5} time={stats.time_ms:.2f}ms"
    )


@app.command()
def run(
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    algorithm: t.Annotated[
        SearchAlgorithm, typer.Option("--algorithm")
    ] = SearchAlgorithm.ASTAR,
    random_walls: t.Annotated[t.Optional[float], typer.Option("--random-walls")] = None,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
    delay: t.Annotated[float, typer.Option("--delay")] = config.DEFAULT_PLAYBACK_DELAY,
    show_visited: t.Annotated[bool, typer.Option("--show-visited/--no-show-visited")] = True,
    verbose: t.Annotated[bool, typer.Option("--verbose")] = False,
):
    grid = load_grid(config_file, random_walls, seed)
    runner = SearchRunner(grid, logger=GridSearchLogger(printout=verbose))
    result = runner.run(algorithm)

    if delay > 0:
        visited: t.List[t.Tuple[int, int]] = []
        path: t.List[t.Tuple[int, int]] = []

        def draw(frame: PlaybackFrame):
            if frame.phase == VISIT_PHASE:
                visited.append(frame.cell)
            else:
                path.append(frame.cell)
            typer.clear()
            typer.echo("\n".join(grid.to_ascii(visited=visited, path=path)))

        play(result, draw, delay=delay)
    else:
        visited_cells = result.visitation_order if show_visited else []
        typer.echo("\n".join(grid.to_ascii(visited=visited_cells, path=result.path)))

    typer.echo(format_stats(result))
    if not result.path_found:
        typer.echo("No path found.")


@app.command()
def compare(
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    random_walls: t.Annotated[t.Optional[float], typer.Option("--random-walls")] = None,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
):
    grid = load_grid(config_file, random_walls, seed)
    runner = SearchRunner(grid)
    for result in runner.run_all().values():
        typer.echo(format_stats(result))


@app.command()
def gen_map(
    out: t.Annotated[str, typer.Option("--out")] = "grid.yaml",
    rows: t.Annotated[int, typer.Option("--rows", min=1)] = config.DEFAULT_ROWS,
    # Start and end must differ, which needs at least two columns
    cols: t.Annotated[int, typer.Option("--cols", min=2)] = config.DEFAULT_COLS,
    density: t.Annotated[
        float, typer.Option("--density", min=0.0, max=1.0)
    ] = config.DEFAULT_WALL_DENSITY,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
):
    # Same placement as the default 20x40 grid: (10, 5) -> (10, 35)
    start = (rows // 2, cols // 8)
    end = (rows // 2, min(cols - cols // 8, cols - 1))
    grid = Grid(rows=rows, cols=cols, start=start, end=end)
    grid.generate_random_walls(density=density, seed=seed)
    grid.print_grid()
    with open(out, "w") as f:
        yaml.safe_dump(
            grid.to_config().model_dump(mode="json", exclude_none=True),
            f,
            sort_keys=False,
        )


if __name__ == "__main__":
    app()
