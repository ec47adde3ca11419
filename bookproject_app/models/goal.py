"""Reading goal model."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..db_instance import db


class ReadingGoal(db.Model):
    """
    A user's reading target for one calendar year.
    At most one row per (user, year); saving a new goal replaces it.
    """
    __tablename__ = 'reading_goals'

    GOAL_TYPE_BOOKS = 'BOOKS'
    GOAL_TYPE_PAGES = 'PAGES'

    goal_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False)
    year = db.Column(db.Integer, nullable=False)

    goal_type = db.Column(db.String(10), nullable=False, default=GOAL_TYPE_BOOKS)
    target = db.Column(db.Integer, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        db.UniqueConstraint('user_id', 'year', name='_reading_goal_user_year_uc'),
        db.CheckConstraint('target > 0', name='_reading_goal_target_positive'),
    )

    def __repr__(self):
        return f'<ReadingGoal {self.user_id}/{self.year}: {self.target} {self.goal_type}>'
