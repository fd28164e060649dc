"""
Grid search algorithms: A*, Dijkstra, breadth-first and depth-first search.

All of them work on a SearchGrid arena and share the same contract:
- they take the arena and the start and end cell indices,
- they return the indices of the cells in the order they were marked visited,
- they leave `previous`, `distance` and `visited` in the arena for path reconstruction.

Exploration stops as soon as the end cell is popped and marked visited. If the
frontier empties before that, the end cell stays unreached and
`reconstruct_path` returns an empty path.
"""

import heapq
import typing as t
from collections import deque

import numpy as np

from gridsearch.exceptions import SearchIterationLimitError
from gridsearch.utils import utils
from gridsearch.world.search_grid import NO_PREVIOUS, SearchGrid

SearchFunction = t.Callable[[SearchGrid, int, int], t.List[int]]


def _mark_visited(
    search_grid: SearchGrid, index: int, visitation_order: t.List[int]
) -> None:
    search_grid.visited[index] = True
    visitation_order.append(index)
    if len(visitation_order) > search_grid.max_iterations:
        raise SearchIterationLimitError(search_grid.max_iterations)


def a_star(search_grid: SearchGrid, start: int, end: int) -> t.List[int]:
    """
    Best-first search on `distance + manhattan(cell, end)`.

    The open set is a list that is stably sorted on f before every selection,
    so among cells with equal f the one ranked first at the previous sort wins,
    and cells added since then come after it. A cell whose distance improves
    while in the open set keeps its slot in the list. The in-open marker array
    replaces linear membership scans.
    """
    visitation_order: t.List[int] = []
    distance, previous = search_grid.distance, search_grid.previous
    end_cell = search_grid.cell(end)
    heuristic = [
        utils.manhattan_distance(search_grid.cell(i), end_cell)
        for i in range(search_grid.size)
    ]

    def f_score(index: int) -> int:
        return int(distance[index]) + heuristic[index]

    in_open = np.zeros(search_grid.size, dtype=np.bool_)
    open_list: t.List[int] = [start]
    distance[start] = 0
    in_open[start] = True

    while open_list:
        # list.sort is stable, ties keep their previous relative order
        open_list.sort(key=f_score)
        current = open_list.pop(0)
        in_open[current] = False

        if search_grid.is_wall(current):
            continue
        if not search_grid.is_reached(current):
            break

        _mark_visited(search_grid, current, visitation_order)
        if current == end:
            break

        tentative_distance = int(distance[current]) + 1
        for neighbor in search_grid.neighbors(current):
            if tentative_distance < distance[neighbor]:
                distance[neighbor] = tentative_distance
                previous[neighbor] = current
                if not in_open[neighbor]:
                    in_open[neighbor] = True
                    open_list.append(neighbor)

    return visitation_order


def dijkstra(search_grid: SearchGrid, start: int, end: int) -> t.List[int]:
    """
    Uniform-cost search where every cell of the grid is conceptually in the frontier.

    Cells are selected as if the whole grid, in row-major order, were stably
    sorted by distance before each step: ties go to the cell whose distance was
    set in the earliest expansion, then to the lowest row-major index. Unreached
    cells are never pushed, so an empty heap means the minimum remaining
    distance is unreached.
    """
    visitation_order: t.List[int] = []
    distance, visited, previous = (
        search_grid.distance,
        search_grid.visited,
        search_grid.previous,
    )

    distance[start] = 0
    expansion = 0
    heap: t.List[t.Tuple[int, int, int]] = [(0, expansion, start)]

    while heap:
        cost, _expansion, current = heapq.heappop(heap)
        if visited[current] or cost != distance[current]:
            continue

        if search_grid.is_wall(current):
            continue

        _mark_visited(search_grid, current, visitation_order)
        if current == end:
            break

        expansion += 1
        new_distance = cost + 1
        for neighbor in search_grid.neighbors(current):
            if new_distance < distance[neighbor]:
                distance[neighbor] = new_distance
                previous[neighbor] = current
                heapq.heappush(heap, (new_distance, expansion, neighbor))

    return visitation_order


def breadth_first_search(
    search_grid: SearchGrid, start: int, end: int
) -> t.List[int]:
    """Cells are marked visited when enqueued, so no cell is ever enqueued twice."""
    visitation_order: t.List[int] = []
    distance, visited, previous = (
        search_grid.distance,
        search_grid.visited,
        search_grid.previous,
    )

    queue = deque([start])
    visited[start] = True
    distance[start] = 0

    while queue:
        current = queue.popleft()
        visitation_order.append(current)
        if len(visitation_order) > search_grid.max_iterations:
            raise SearchIterationLimitError(search_grid.max_iterations)
        if current == end:
            break

        for neighbor in search_grid.neighbors(current):
            if not visited[neighbor]:
                visited[neighbor] = True
                previous[neighbor] = current
                distance[neighbor] = distance[current] + 1
                queue.append(neighbor)

    return visitation_order


def depth_first_search(search_grid: SearchGrid, start: int, end: int) -> t.List[int]:
    """
    Cells are marked visited when popped, so the stack may hold duplicates.

    The predecessor of a cell is overwritten by every push, the one recorded is
    the last push before the cell gets popped. The resulting path is not
    necessarily the shortest.
    """
    visitation_order: t.List[int] = []
    visited, previous = search_grid.visited, search_grid.previous

    stack = [start]
    while stack:
        current = stack.pop()
        if visited[current] or search_grid.is_wall(current):
            continue

        _mark_visited(search_grid, current, visitation_order)
        if current == end:
            break

        for neighbor in search_grid.neighbors(current):
            if not visited[neighbor]:
                previous[neighbor] = current
                stack.append(neighbor)

    return visitation_order


def reconstruct_path(search_grid: SearchGrid, end: int) -> t.List[int]:
    """
    Follows back-pointers from `end` to the start.

    Returns an empty list when `end` has no predecessor, which is how an
    unreachable end cell is reported. Reading the arena has no side effect, so
    calling this twice yields the same path.
    """
    path = [end]
    current = end
    while search_grid.previous[current] != NO_PREVIOUS:
        current = int(search_grid.previous[current])
        path.append(current)
        if len(path) > search_grid.max_iterations:
            raise SearchIterationLimitError(search_grid.max_iterations)
    path.reverse()
    return path if len(path) > 1 else []
