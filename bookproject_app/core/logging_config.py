"""Rotating log file for the Flask app logger."""

import os
import logging
from logging.handlers import RotatingFileHandler

from flask import Flask

LOG_FILE_NAME = 'bookproject.log'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_file_logging(app: Flask, log_dir: str, log_level: str = 'INFO') -> RotatingFileHandler:
    """
    Write the app's log records (and those of ``bookproject_app.*`` module loggers,
    which propagate to it) to ``<log_dir>/bookproject.log``.

    A file handler left by an earlier app instance is replaced, so each app
    logs to its own configured directory.
    """
    os.makedirs(log_dir, exist_ok=True)

    for handler in list(app.logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            app.logger.removeHandler(handler)
            handler.close()

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding='utf-8',
    )
    file_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    app.logger.addHandler(file_handler)

    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    app.logger.info("File logging enabled at %s", file_handler.baseFilename)
    return file_handler
