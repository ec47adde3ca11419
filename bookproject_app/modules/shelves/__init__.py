"""Shelf access used by the reading goal page."""

from .services import PredefinedShelfService

__all__ = ['PredefinedShelfService']
