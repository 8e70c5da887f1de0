import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_prefix_shard_logger():
    yield
    logger = logging.getLogger("prefix_shard")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
