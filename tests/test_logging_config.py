import logging
from logging.handlers import RotatingFileHandler

import pytest

from bookproject_app import create_app, db
from bookproject_app.core.logging_config import LOG_FILE_NAME

from conftest import TestConfig


@pytest.fixture
def file_logging_app(tmp_path):
    log_dir = tmp_path / 'logs'

    class FileLoggingConfig(TestConfig):
        LOG_TO_FILE = True
        LOG_DIR = str(log_dir)

    app = create_app(FileLoggingConfig)
    with app.app_context():
        yield app, log_dir
        db.session.remove()
        db.drop_all()

    for handler in list(app.logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            app.logger.removeHandler(handler)
            handler.close()


def _file_handlers(app):
    return [handler for handler in app.logger.handlers if isinstance(handler, RotatingFileHandler)]


def test_app_logs_to_rotating_file(file_logging_app):
    app, log_dir = file_logging_app

    app.logger.info('reading goal log line')
    logging.getLogger('bookproject_app.modules.goals.events').info('goal event line')
    for handler in _file_handlers(app):
        handler.flush()

    content = (log_dir / LOG_FILE_NAME).read_text(encoding='utf-8')
    assert 'reading goal log line' in content
    assert 'goal event line' in content
    assert 'File logging enabled' in content


def test_single_file_handler_per_app(file_logging_app):
    app, _ = file_logging_app

    assert len(_file_handlers(app)) == 1


def test_no_file_handler_by_default(app):
    assert _file_handlers(app) == []
