import pytest
from loguru import logger

from hrfilesize import reset


@pytest.fixture(autouse=True)
def _default_config():
    reset()
    yield
    reset()
    logger.disable('hrfilesize')
