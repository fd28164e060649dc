import time
import typing as t

from gridsearch.data_models import GridCellModel, SearchResult

VISIT_PHASE = "visit"
PATH_PHASE = "path"


class PlaybackFrame(t.NamedTuple):
    phase: t.Literal["visit", "path"]
    index: int
    cell: GridCellModel


def iter_playback(result: SearchResult) -> t.Iterator[PlaybackFrame]:
    """Yields visited cells in visitation order, then path cells from start to end."""
    for i, cell in enumerate(result.visitation_order):
        yield PlaybackFrame(VISIT_PHASE, i, cell)
    for i, cell in enumerate(result.path):
        yield PlaybackFrame(PATH_PHASE, i, cell)


def play(
    result: SearchResult,
    on_frame: t.Callable[[PlaybackFrame], None],
    delay: float = 0.0,
    sleep: t.Callable[[float], None] = time.sleep,
) -> int:
    """Feeds every frame to `on_frame`, waiting `delay` seconds between frames.

    :return: the number of frames played
    """
    n_frames = 0
    for frame in iter_playback(result):
        if n_frames > 0 and delay > 0:
            sleep(delay)
        on_frame(frame)
        n_frames += 1
    return n_frames
