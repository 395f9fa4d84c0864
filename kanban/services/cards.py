"""Card lifecycle operations that touch ordering or the activity log."""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from kanban.errors import ValidationError
from kanban.models import ActivityAction, Card, CardLabel, User
from kanban.schemas.activity import FieldChangedMetadata
from kanban.services import activity, moves, positions
from kanban.services.loaders import load_card, load_column, load_label, ordered_cards

logger = logging.getLogger(__name__)

TRACKED_FIELDS = ("title", "description", "due_date", "assignee_id")


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def create_card(db: Session, column_id: int, title: str, actor_id: Optional[int] = None) -> Card:
    """New cards go on top of the column; existing cards shift down by one."""
    column = load_column(db, column_id)
    siblings = ordered_cards(db, column.id)

    card = Card(column_id=column.id, title=title, position=-1)
    db.add(card)
    positions.renumber(db, [card, *siblings])
    db.flush()

    activity.record(db, board_id=column.board_id, action=ActivityAction.CARD_CREATED, card_id=card.id, user_id=actor_id)
    return card


def update_card(db: Session, card_id: int, changes: Dict[str, Any], actor_id: Optional[int] = None) -> Card:
    """Apply field changes, then an optional move, recording each change.

    ``changes`` holds only the fields the client sent. ``column_id`` and
    ``position`` are routed to the move coordinator.
    """
    card = load_card(db, card_id)
    board_id = card.column.board_id
    changes = dict(changes)
    target_column_id = changes.pop("column_id", None)
    target_position = changes.pop("position", None)

    if "assignee_id" in changes and changes["assignee_id"] is not None:
        if db.get(User, changes["assignee_id"]) is None:
            raise ValidationError("Assignee does not exist")

    unknown = set(changes) - set(TRACKED_FIELDS)
    if unknown:
        raise ValidationError(f"Cannot update card fields: {', '.join(sorted(unknown))}")

    for field in TRACKED_FIELDS:
        if field not in changes:
            continue
        old_value, new_value = getattr(card, field), changes[field]
        if field == "title" and not new_value:
            raise ValidationError("Card title is required")
        if old_value == new_value:
            continue
        setattr(card, field, new_value)
        activity.record(
            db,
            board_id=board_id,
            action=ActivityAction.CARD_UPDATED,
            metadata=FieldChangedMetadata(field=field, old_value=_as_text(old_value), new_value=_as_text(new_value)),
            card_id=card.id,
            user_id=actor_id,
        )

    if target_column_id is not None:
        moves.move_card(db, card.id, target_column_id, target_position, actor_id=actor_id)
    elif target_position is not None:
        moves.move_card(db, card.id, card.column_id, target_position, actor_id=actor_id)

    db.flush()
    return card


def delete_card(db: Session, card_id: int, actor_id: Optional[int] = None) -> None:
    """Delete a card and close the gap it leaves in its column.

    The card's comments, label links and activity entries go with it; the
    ``card.deleted`` entry keeps no card reference so it outlives the card.
    """
    card = load_card(db, card_id)
    column = card.column
    remaining = positions.remove(ordered_cards(db, column.id), card)

    db.delete(card)
    db.flush()
    positions.renumber(db, remaining)

    activity.record(db, board_id=column.board_id, action=ActivityAction.CARD_DELETED, user_id=actor_id)
    logger.info("Deleted card %s from column %s", card_id, column.id)


def toggle_label(db: Session, card_id: int, label_id: int) -> bool:
    """Attach the label if missing, detach it otherwise. Returns whether it is now attached."""
    card = load_card(db, card_id)
    label = load_label(db, label_id)
    if label.board_id != card.column.board_id:
        raise ValidationError("Label belongs to a different board")

    existing = db.get(CardLabel, (card.id, label.id))
    if existing is not None:
        db.delete(existing)
        db.flush()
        return False

    db.add(CardLabel(card_id=card.id, label_id=label.id))
    db.flush()
    return True
