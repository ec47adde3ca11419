"""Shelf and book models."""

from __future__ import annotations

from ..db_instance import db


class PredefinedShelf(db.Model):
    """One of the fixed shelves every user owns."""

    __tablename__ = 'predefined_shelves'

    TO_READ = 'TO_READ'
    READING = 'READING'
    READ = 'READ'
    DID_NOT_FINISH = 'DID_NOT_FINISH'
    SHELF_NAMES = (TO_READ, READING, READ, DID_NOT_FINISH)

    shelf_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False)
    shelf_name = db.Column(db.String(20), nullable=False)

    books = db.relationship('Book', backref='shelf', lazy='dynamic', cascade='all, delete-orphan')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'shelf_name', name='_predefined_shelf_user_name_uc'),
    )

    def __repr__(self):
        return f'<PredefinedShelf {self.shelf_name} of user {self.user_id}>'


class Book(db.Model):
    __tablename__ = 'books'

    book_id = db.Column(db.Integer, primary_key=True)
    shelf_id = db.Column(db.Integer, db.ForeignKey('predefined_shelves.shelf_id'), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(255))
    number_of_pages = db.Column(db.Integer, nullable=True)
    date_finished_reading = db.Column(db.Date, nullable=True)

    __table_args__ = (
        db.Index('ix_books_date_finished', 'date_finished_reading'),
    )

    def __repr__(self):
        return f'<Book {self.title}>'
