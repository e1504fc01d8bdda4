import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_logging():
    # CliRunner swaps sys.stderr per invocation; drop handlers bound to it
    yield
    logger = logging.getLogger("sheet2songs")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
