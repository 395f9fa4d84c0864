"""Full-list reorders of columns within a board and cards within a column."""
import logging
from typing import List, Sequence

from sqlalchemy.orm import Session

from kanban.errors import ValidationError
from kanban.services import positions
from kanban.services.loaders import load_board, load_column, ordered_cards, ordered_columns

logger = logging.getLogger(__name__)


def _validated_order(children: Sequence, submitted_ids: Sequence[int], kind: str, parent: str) -> List:
    """Map ``submitted_ids`` onto ``children``, rejecting anything but a permutation of them."""
    if not submitted_ids:
        raise ValidationError(f"The {kind} order cannot be empty")

    if len(set(submitted_ids)) != len(submitted_ids):
        raise ValidationError(f"The {kind} order contains duplicate ids")

    by_id = {child.id: child for child in children}
    foreign = [child_id for child_id in submitted_ids if child_id not in by_id]
    if foreign:
        raise ValidationError(
            f"Unknown {kind} ids for this {parent}: {', '.join(str(child_id) for child_id in foreign)}"
        )

    if len(submitted_ids) != len(by_id):
        raise ValidationError(f"The {kind} order must list every {kind} of the {parent}")

    return [by_id[child_id] for child_id in submitted_ids]


def reorder_columns(db: Session, board_id: int, column_ids: Sequence[int]) -> None:
    """Give each column of the board the index it has in ``column_ids``. The caller commits."""
    load_board(db, board_id)
    order = _validated_order(ordered_columns(db, board_id), column_ids, "column", "board")
    positions.renumber(db, order)
    logger.info("Reordered %d columns on board %s", len(order), board_id)


def reorder_cards(db: Session, column_id: int, card_ids: Sequence[int]) -> None:
    """Give each card of the column the index it has in ``card_ids``. The caller commits."""
    load_column(db, column_id)
    order = _validated_order(ordered_cards(db, column_id), card_ids, "card", "column")
    positions.renumber(db, order)
    logger.info("Reordered %d cards in column %s", len(order), column_id)
