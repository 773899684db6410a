import logging
from logging.handlers import RotatingFileHandler

import pytest

from instance_finder.config.schemas import LoggingConfig
from instance_finder.domain.core.exceptions import ConfigurationError
from instance_finder.helpers.logger import DetailedFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_stdout_destination():
    # Act
    setup_logging(LoggingConfig(level='info', destination='stdout'))

    # Assert
    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert isinstance(root_logger.handlers[0].formatter, DetailedFormatter)


def test_file_destination_creates_directory(tmp_path):
    # Arrange
    log_file = tmp_path / 'nested' / 'finder.log'

    # Act
    setup_logging(LoggingConfig(destination='both', file_path=str(log_file), level='DEBUG'))
    get_logger('instance_finder.test').warning("written to file", key="value")

    # Assert
    handler_types = {type(h) for h in logging.getLogger().handlers}
    assert RotatingFileHandler in handler_types
    assert logging.StreamHandler in handler_types
    for handler in logging.getLogger().handlers:
        handler.flush()
    content = log_file.read_text()
    assert "written to file" in content
    assert "key='value'" in content


def test_detailed_formatter_adds_caller_info():
    record = logging.LogRecord('x', logging.INFO, __file__, 10, 'msg', None, None, func='fn')

    formatted = DetailedFormatter('%(caller_info)s %(message)s').format(record)

    assert formatted == 'test_logger.fn:10 msg'


def test_unwritable_log_directory_raises_configuration_error(tmp_path):
    # Arrange
    blocker = tmp_path / 'not_a_dir'
    blocker.write_text('')

    # Act & Assert
    with pytest.raises(ConfigurationError, match="Cannot open log file"):
        setup_logging(LoggingConfig(destination='file', file_path=str(blocker / 'finder.log')))
