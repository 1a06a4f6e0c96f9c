import logging

import pytest

from backupbuddy.log import logger


@pytest.fixture(autouse=True)
def detach_file_handlers():
    yield
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.INFO)


@pytest.fixture
def write_config(tmp_path):
    def _write(text, name="config.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
