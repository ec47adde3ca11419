"""
Predefined Shelf Service
Read access to the user's shelves. Only the READ shelf counts towards a reading goal.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from flask import current_app
from sqlalchemy import func

from bookproject_app.db_instance import db
from bookproject_app.models import Book, PredefinedShelf, ReadingGoal


class PredefinedShelfService:

    @staticmethod
    def ensure_default_shelves(user_id: int) -> list[PredefinedShelf]:
        """Create any missing predefined shelf for the user. Caller must commit."""
        existing = {
            shelf.shelf_name: shelf
            for shelf in PredefinedShelf.query.filter_by(user_id=user_id).all()
        }
        shelves = []
        for name in PredefinedShelf.SHELF_NAMES:
            shelf = existing.get(name)
            if shelf is None:
                shelf = PredefinedShelf(user_id=user_id, shelf_name=name)
                db.session.add(shelf)
            shelves.append(shelf)
        return shelves

    @staticmethod
    def find_read_shelf(user_id: int) -> Optional[PredefinedShelf]:
        return PredefinedShelf.query.filter_by(
            user_id=user_id,
            shelf_name=PredefinedShelf.READ,
        ).first()

    @staticmethod
    def completed_this_year(user_id: int, year: int, goal_type: str) -> int:
        """
        Books (or pages) on the READ shelf finished during ``year``.
        A missing shelf counts as nothing read; a book without a page count adds 0 pages.
        """
        read_shelf = PredefinedShelfService.find_read_shelf(user_id)
        if read_shelf is None:
            current_app.logger.info("No read shelf for user %s", user_id)
            return 0

        if goal_type == ReadingGoal.GOAL_TYPE_BOOKS:
            aggregate = func.count(Book.book_id)
        else:
            aggregate = func.coalesce(func.sum(func.coalesce(Book.number_of_pages, 0)), 0)

        total = (
            db.session.query(aggregate)
            .filter(
                Book.shelf_id == read_shelf.shelf_id,
                Book.date_finished_reading.isnot(None),
                Book.date_finished_reading >= date(year, 1, 1),
                Book.date_finished_reading <= date(year, 12, 31),
            )
            .scalar()
        )
        return int(total or 0)
