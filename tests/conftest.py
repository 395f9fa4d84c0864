import pytest
from sqlalchemy.orm import Session

import kanban.api.v1.boards as board_routes
import kanban.api.v1.cards as card_routes
import kanban.models as models
import kanban.schemas as schemas
from kanban.database import Base
from kanban.dependencies import get_default_user
from tests.helpers import TestingSessionLocal, engine


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db_session: Session) -> models.User:
    return get_default_user(db_session)


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    other = models.User(name="Bob", email="bob@example.com")
    db_session.add(other)
    db_session.commit()
    return other


@pytest.fixture
def make_board(db_session: Session, user: models.User):
    """Create a board through the API; it starts with To Do, In Progress and Done."""

    def _make_board(name: str = "Demo Board") -> schemas.BoardResponse:
        return board_routes.create_board(schemas.BoardCreate(name=name), db_session, user)

    return _make_board


@pytest.fixture
def make_cards(db_session: Session, user: models.User):
    """Create cards in a column so that they read top to bottom as ``titles``."""

    def _make_cards(column_id: int, *titles: str):
        created = [
            card_routes.create_card(column_id, schemas.CardCreate(title=title), db_session, user)
            for title in reversed(titles)
        ]
        return list(reversed(created))

    return _make_cards

