import os
import sys
from datetime import date

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bookproject_app import create_app, db
from bookproject_app.config import Config
from bookproject_app.models import Book, PredefinedShelf, User
from bookproject_app.modules.shelves import PredefinedShelfService


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    LOG_TO_FILE = False
    SYSTEM_TIMEZONE = 'UTC'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def reader(app):
    user = User(username='reader', email='reader@example.com')
    user.set_password('password')
    db.session.add(user)
    db.session.flush()
    PredefinedShelfService.ensure_default_shelves(user.user_id)
    db.session.commit()
    return user


@pytest.fixture
def add_book(app):
    """Put a book on one of the reader's shelves."""

    def _add_book(user, title, finished=None, pages=None, shelf_name=PredefinedShelf.READ):
        shelf = PredefinedShelf.query.filter_by(user_id=user.user_id, shelf_name=shelf_name).first()
        book = Book(
            shelf_id=shelf.shelf_id,
            title=title,
            number_of_pages=pages,
            date_finished_reading=finished,
        )
        db.session.add(book)
        db.session.commit()
        return book

    return _add_book


@pytest.fixture
def logged_in_client(client, reader):
    with client.session_transaction() as sess:
        sess['_user_id'] = str(reader.user_id)
        sess['_fresh'] = True
    return client


# 2024-03-13 falls in ISO week 11
FIXED_TODAY = date(2024, 3, 13)


@pytest.fixture
def fixed_today(monkeypatch):
    from bookproject_app.modules.goals import routes

    monkeypatch.setattr(routes, 'user_today', lambda *args, **kwargs: FIXED_TODAY)
    return FIXED_TODAY
