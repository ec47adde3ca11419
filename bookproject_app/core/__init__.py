"""Core infrastructure for the Book Project app."""
