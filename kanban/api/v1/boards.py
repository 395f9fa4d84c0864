"""Board endpoints"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, selectinload

from kanban.config import settings
from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.models import Board, BoardColumn, Card, CardLabel, User
from kanban.schemas import (
    ActivityEntryResponse,
    BoardCreate,
    BoardDescriptionUpdate,
    BoardRename,
    BoardResponse,
    BoardSummary,
    ColumnReorder,
)
from kanban.services import activity, reorder
from kanban.services.columns import create_default_columns
from kanban.services.loaders import load_board
from kanban.api.v1.serializers import serialize_board

router = APIRouter(tags=["boards"])


def _load_board_tree(db: Session, board_id: int) -> Board:
    load_board(db, board_id)
    return (
        db.query(Board)
        .options(
            selectinload(Board.labels),
            selectinload(Board.columns)
            .selectinload(BoardColumn.cards)
            .selectinload(Card.card_labels)
            .selectinload(CardLabel.label),
            selectinload(Board.columns).selectinload(BoardColumn.cards).selectinload(Card.comments),
        )
        .filter(Board.id == board_id)
        .one()
    )


@router.get("/boards", response_model=List[BoardSummary])
def list_boards(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return db.query(Board).order_by(Board.updated_at.desc(), Board.id.desc()).all()


@router.post("/boards", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    board_in: BoardCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a board together with its default columns."""
    with transaction(db):
        board = Board(name=board_in.name, description=board_in.description)
        db.add(board)
        db.flush()
        create_default_columns(db, board, settings.default_columns_list)

    return serialize_board(_load_board_tree(db, board.id))


@router.get("/boards/{board_id}", response_model=BoardResponse)
def get_board(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Return a board with its ordered columns, their ordered cards and its labels."""
    return serialize_board(_load_board_tree(db, board_id))


@router.patch("/boards/{board_id}/name", response_model=BoardSummary)
def rename_board(
    board_id: int,
    board_in: BoardRename,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        board = load_board(db, board_id)
        board.name = board_in.name
    db.refresh(board)
    return board


@router.patch("/boards/{board_id}/description", response_model=BoardSummary)
def update_board_description(
    board_id: int,
    board_in: BoardDescriptionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        board = load_board(db, board_id)
        board.description = board_in.description
    db.refresh(board)
    return board


@router.post("/boards/{board_id}/favorite", response_model=BoardSummary)
def toggle_favorite(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    with transaction(db):
        board = load_board(db, board_id)
        board.is_favorite = not board.is_favorite
    db.refresh(board)
    return board


@router.delete("/boards/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Delete a board; columns, cards, labels, comments and activity go with it."""
    with transaction(db):
        db.delete(load_board(db, board_id))


@router.put("/boards/{board_id}/columns/reorder")
def reorder_columns(
    board_id: int,
    order_in: ColumnReorder,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Dict[str, bool]:
    with transaction(db):
        reorder.reorder_columns(db, board_id, order_in.column_ids)
    return {"ok": True}


@router.get("/boards/{board_id}/activity", response_model=List[ActivityEntryResponse])
def list_board_activity(
    board_id: int,
    card_id: Optional[int] = None,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    load_board(db, board_id)
    return activity.list_activity(db, board_id, card_id=card_id, limit=limit)
