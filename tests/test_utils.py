import logging

import pytest

from catalog_server.core.logger import LOGGER_NAME, logger
from catalog_server.core.utils import timed


@pytest.fixture
def catalog_log(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


def test_timed_returns_result_and_logs_duration(catalog_log):
    @timed
    def list_things(limit):
        return list(range(limit))

    assert list_things(3) == [0, 1, 2]
    assert list_things.__name__ == "list_things"
    assert any(r.getMessage().startswith("list_things took ") for r in catalog_log.records)


def test_timed_logs_failed_calls(catalog_log):
    @timed
    def broken():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        broken()
    assert any(r.getMessage().startswith("broken took ") for r in catalog_log.records)


def test_logger_does_not_propagate():
    assert logger.name == "movie_catalog"
    assert logger.propagate is False
