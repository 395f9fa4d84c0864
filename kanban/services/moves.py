"""Move coordinator: relocating a card within or across columns."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from kanban.errors import ValidationError
from kanban.models import ActivityAction, Card
from kanban.schemas.activity import CardMovedMetadata
from kanban.services import activity, positions
from kanban.services.loaders import load_card, load_column, ordered_cards

logger = logging.getLogger(__name__)


def move_card(
    db: Session,
    card_id: int,
    target_column_id: int,
    target_position: Optional[int] = None,
    actor_id: Optional[int] = None,
) -> Card:
    """Move a card to ``target_position`` of ``target_column_id``.

    A missing position means "end of the target column" for a move to another
    column and "stay put" within the card's own column. Positions are clamped
    into range. Both the source and the destination column stay dense and the
    move is recorded as one ``card.moved`` entry. Nothing is written when the
    card already sits at the requested place. The caller commits.
    """
    card = load_card(db, card_id)
    source = card.column
    target = load_column(db, target_column_id)

    if target.board_id != source.board_id:
        raise ValidationError("Cards can only move between columns of the same board")

    if target.id == source.id:
        if target_position is None:
            return card
        siblings = ordered_cards(db, source.id)
        order = positions.relocate(siblings, card, target_position)
        if order == siblings:
            return card
        positions.renumber(db, order)
    else:
        source_order = positions.remove(ordered_cards(db, source.id), card)
        target_siblings = ordered_cards(db, target.id)
        index = len(target_siblings) if target_position is None else target_position
        target_order = positions.insert_at(target_siblings, card, index)
        card.column_id = target.id
        positions.renumber(db, source_order, target_order)

    activity.record(
        db,
        board_id=source.board_id,
        action=ActivityAction.CARD_MOVED,
        metadata=CardMovedMetadata(from_column=source.name, to_column=target.name),
        card_id=card.id,
        user_id=actor_id,
    )
    db.flush()
    logger.info("Moved card %s from column %s to column %s at %s", card.id, source.id, target.id, card.position)
    return card
