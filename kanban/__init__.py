"""Kanban board service: boards, ordered columns and cards, labels, comments and an activity log."""

__version__ = "1.0.0"
