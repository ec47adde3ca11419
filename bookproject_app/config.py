# File: bookproject_app/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# bookproject_app/ sits one level below the project root
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "bookproject.db")


class Config:
    """Configuration for the Book Project app."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Reading goal schedule
    WEEKS_IN_YEAR = int(os.environ.get('WEEKS_IN_YEAR', 52))
    SYSTEM_TIMEZONE = os.environ.get('SYSTEM_TIMEZONE', 'UTC')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', '0') == '1'

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if cls.LOG_TO_FILE:
            os.makedirs(cls.LOG_DIR, exist_ok=True)
