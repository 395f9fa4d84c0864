"""Kanban Database Models"""
from kanban.models.user import User
from kanban.models.board import Board
from kanban.models.column import BoardColumn
from kanban.models.card import Card
from kanban.models.label import Label, CardLabel
from kanban.models.comment import Comment
from kanban.models.activity_log import ActivityAction, ActivityLogEntry

__all__ = [
    "User",
    "Board",
    "BoardColumn",
    "Card",
    "Label",
    "CardLabel",
    "Comment",
    "ActivityAction",
    "ActivityLogEntry",
]
