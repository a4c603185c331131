"""
Tests for the logging setup.
"""

import pytest
from loguru import logger

from hrfilesize import compare, configure
from hrfilesize.utils import level_no, set_logger


def test_level_no():
    assert level_no(10) == 10
    assert level_no('debug') == 10
    assert level_no('SUCCESS') == 25


def test_level_no_unknown():
    with pytest.raises(KeyError, match='VERBOSE'):
        level_no('VERBOSE')


def test_set_logger_file(tmp_path):
    path = tmp_path / 'hrfilesize.log'

    set_logger('INFO', log_file=path)
    logger.info('size={}', '10.0 KB')
    logger.debug('hidden')
    logger.remove()

    text = path.read_text(encoding='UTF-8-SIG')
    assert 'size=10.0 KB' in text
    assert 'hidden' not in text


def test_library_logging_off_by_default():
    messages = []
    sink = logger.add(messages.append, level='TRACE', format='{message}')

    try:
        configure(unit_system='binary')
        compare((1.0, 'KiB'), (1.0, 'MiB'))
        assert messages == []

        logger.enable('hrfilesize')
        configure(unit_system='decimal')
        assert any('unit_system=decimal' in m for m in messages)
    finally:
        logger.disable('hrfilesize')
        logger.remove(sink)
