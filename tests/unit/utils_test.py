import logging

from gridsearch.utils import utils


def test_manhattan_distance():
    assert utils.manhattan_distance((10, 5), (10, 35)) == 30
    assert utils.manhattan_distance((3, 1), (0, 4)) == 6


def test_are_adjacent():
    assert utils.are_adjacent((1, 1), (0, 1))
    assert utils.are_adjacent((1, 1), (1, 2))
    assert not utils.are_adjacent((1, 1), (2, 2))
    assert not utils.are_adjacent((1, 1), (1, 1))


def test_get_neighbors():
    assert utils.get_neighbors((0, 0), 2, 2) == [(1, 0), (0, 1)]


class TestGridSearchLogger:
    def test_collects_logs(self, capsys):
        logger = utils.GridSearchLogger(printout=False)
        logger.append(utils.GridSearchLog("hello", 2))
        assert len(logger) == 1
        assert str(logger[0]) == "At run 2: 'hello'"
        assert capsys.readouterr().out == ""

    def test_printout(self, capsys):
        logger = utils.GridSearchLogger()
        logger.append(utils.GridSearchLog("hello", 0))
        assert "hello" in capsys.readouterr().out

    def test_std_logger(self, caplog):
        std_logger = logging.getLogger("gridsearch.test")
        logger = utils.GridSearchLogger(printout=False, std_logger=std_logger)
        with caplog.at_level(logging.INFO, logger="gridsearch.test"):
            logger.append(utils.GridSearchLog("search done", 1))
        assert "[gridsearch]:[run=1]: search done" in caplog.text

    def test_to_json(self):
        log = utils.GridSearchLog("hello", 0, timestamp="now")
        assert '"message": "hello"' in log.toJSON()
