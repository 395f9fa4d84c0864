"""Fetch-or-raise helpers shared by the services and routers."""
from typing import List

from sqlalchemy.orm import Session

from kanban.errors import NotFoundError
from kanban.models import Board, BoardColumn, Card, Comment, Label


def load_board(db: Session, board_id: int) -> Board:
    board = db.get(Board, board_id)
    if board is None:
        raise NotFoundError("Board not found")
    return board


def load_column(db: Session, column_id: int) -> BoardColumn:
    column = db.get(BoardColumn, column_id)
    if column is None:
        raise NotFoundError("Column not found")
    return column


def load_card(db: Session, card_id: int) -> Card:
    card = db.get(Card, card_id)
    if card is None:
        raise NotFoundError("Card not found")
    return card


def load_label(db: Session, label_id: int) -> Label:
    label = db.get(Label, label_id)
    if label is None:
        raise NotFoundError("Label not found")
    return label


def load_comment(db: Session, comment_id: int) -> Comment:
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    return comment


def ordered_columns(db: Session, board_id: int) -> List[BoardColumn]:
    return (
        db.query(BoardColumn)
        .filter(BoardColumn.board_id == board_id)
        .order_by(BoardColumn.position.asc(), BoardColumn.id.asc())
        .all()
    )


def ordered_cards(db: Session, column_id: int) -> List[Card]:
    return (
        db.query(Card)
        .filter(Card.column_id == column_id)
        .order_by(Card.position.asc(), Card.id.asc())
        .all()
    )
