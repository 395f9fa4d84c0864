"""Label endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.models import Label, User
from kanban.schemas import LabelCreate, LabelResponse, LabelUpdate
from kanban.services.loaders import load_board, load_label

router = APIRouter(tags=["labels"])


@router.get("/boards/{board_id}/labels", response_model=List[LabelResponse])
def list_labels(board_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    load_board(db, board_id)
    return db.query(Label).filter(Label.board_id == board_id).order_by(Label.name.asc()).all()


@router.post("/boards/{board_id}/labels", response_model=LabelResponse, status_code=status.HTTP_201_CREATED)
def create_label(
    board_id: int,
    label_in: LabelCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        board = load_board(db, board_id)
        label = Label(board_id=board.id, name=label_in.name, color=label_in.color)
        db.add(label)
    db.refresh(label)
    return label


@router.patch("/labels/{label_id}", response_model=LabelResponse)
def update_label(
    label_id: int,
    label_in: LabelUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        label = load_label(db, label_id)
        label.name = label_in.name
        label.color = label_in.color
    db.refresh(label)
    return label


@router.delete("/labels/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_label(label_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Delete a label; it is detached from every card that carried it."""
    with transaction(db):
        db.delete(load_label(db, label_id))
