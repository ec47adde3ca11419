"""User model."""

from __future__ import annotations

from flask_login import UserMixin
from sqlalchemy.sql import func
from werkzeug.security import generate_password_hash

from ..db_instance import db


class User(UserMixin, db.Model):
    """Owner of reading goals and shelves."""

    __tablename__ = 'users'

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    timezone = db.Column(db.String(50), default='UTC')
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    reading_goals = db.relationship('ReadingGoal', backref='user', lazy=True, cascade='all, delete-orphan')
    shelves = db.relationship('PredefinedShelf', backref='user', lazy=True, cascade='all, delete-orphan')

    def get_id(self):
        return str(self.user_id)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def __repr__(self):
        return f'<User {self.username}>'
