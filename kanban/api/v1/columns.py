"""Column endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.models import User
from kanban.schemas import ColumnCreate, ColumnRename, ColumnResponse, WipLimitUpdate
from kanban.services import columns as column_service
from kanban.services.loaders import load_column

router = APIRouter(tags=["columns"])


@router.post("/boards/{board_id}/columns", response_model=ColumnResponse, status_code=status.HTTP_201_CREATED)
def create_column(
    board_id: int,
    column_in: ColumnCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Append a column to the end of the board."""
    with transaction(db):
        column = column_service.create_column(db, board_id, column_in.name)
    db.refresh(column)
    return column


@router.patch("/columns/{column_id}/name", response_model=ColumnResponse)
def rename_column(
    column_id: int,
    column_in: ColumnRename,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        column = load_column(db, column_id)
        column.name = column_in.name
    db.refresh(column)
    return column


@router.patch("/columns/{column_id}/wip-limit", response_model=ColumnResponse)
def update_wip_limit(
    column_id: int,
    limit_in: WipLimitUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Set or clear the column's WIP limit. The limit is a hint; moves do not check it."""
    with transaction(db):
        column = load_column(db, column_id)
        column.wip_limit = limit_in.wip_limit
    db.refresh(column)
    return column


@router.delete("/columns/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    column_id: int,
    move_cards_to: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a column; with ``move_cards_to`` its cards are appended to that column first."""
    with transaction(db):
        column_service.delete_column(db, column_id, move_cards_to=move_cards_to, actor_id=current_user.id)
