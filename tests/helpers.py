from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import kanban.models as models

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def card_titles(session: Session, column_id: int):
    return [
        (card.title, card.position)
        for card in session.query(models.Card)
        .filter(models.Card.column_id == column_id)
        .order_by(models.Card.position)
        .all()
    ]


def column_names(session: Session, board_id: int):
    return [
        (column.name, column.position)
        for column in session.query(models.BoardColumn)
        .filter(models.BoardColumn.board_id == board_id)
        .order_by(models.BoardColumn.position)
        .all()
    ]


def activity_actions(session: Session, board_id: int):
    return [
        entry.action
        for entry in session.query(models.ActivityLogEntry)
        .filter(models.ActivityLogEntry.board_id == board_id)
        .order_by(models.ActivityLogEntry.id)
        .all()
    ]
