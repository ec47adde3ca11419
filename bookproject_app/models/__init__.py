"""Database models package for Book Project."""

from ..db_instance import db

from .user import User
from .goal import ReadingGoal
from .shelf import Book, PredefinedShelf

__all__ = [
    'db',
    'User',
    'ReadingGoal',
    'PredefinedShelf',
    'Book',
]
