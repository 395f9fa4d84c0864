"""Card endpoints"""
from typing import Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.models import User
from kanban.schemas import (
    ActivityEntryResponse,
    CardCreate,
    CardDetail,
    CardLabelToggleResponse,
    CardReorder,
    CardUpdate,
)
from kanban.services import activity, cards as card_service, reorder
from kanban.services.loaders import load_card
from kanban.api.v1.serializers import serialize_card_detail

router = APIRouter(tags=["cards"])


@router.post("/columns/{column_id}/cards", response_model=CardDetail, status_code=status.HTTP_201_CREATED)
def create_card(
    column_id: int,
    card_in: CardCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a card at the top of the column."""
    with transaction(db):
        card = card_service.create_card(db, column_id, card_in.title, actor_id=current_user.id)
    return serialize_card_detail(load_card(db, card.id))


@router.get("/cards/{card_id}", response_model=CardDetail)
def get_card(card_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return serialize_card_detail(load_card(db, card_id))


@router.patch("/cards/{card_id}", response_model=CardDetail)
def update_card(
    card_id: int,
    card_in: CardUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update card fields; ``column_id``/``position`` move the card."""
    update_data = card_in.model_dump(exclude_unset=True)
    with transaction(db):
        card_service.update_card(db, card_id, update_data, actor_id=current_user.id)
    return serialize_card_detail(load_card(db, card_id))


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(card_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    with transaction(db):
        card_service.delete_card(db, card_id, actor_id=current_user.id)


@router.put("/columns/{column_id}/cards/reorder")
def reorder_cards(
    column_id: int,
    order_in: CardReorder,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Dict[str, bool]:
    with transaction(db):
        reorder.reorder_cards(db, column_id, order_in.card_ids)
    return {"ok": True}


@router.post("/cards/{card_id}/labels/{label_id}", response_model=CardLabelToggleResponse)
def toggle_card_label(
    card_id: int,
    label_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        attached = card_service.toggle_label(db, card_id, label_id)
    return CardLabelToggleResponse(card_id=card_id, label_id=label_id, attached=attached)


@router.get("/cards/{card_id}/activity", response_model=List[ActivityEntryResponse])
def list_card_activity(card_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    card = load_card(db, card_id)
    return activity.list_activity(db, card.column.board_id, card_id=card.id)
