"""Column lifecycle operations that touch ordering."""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from kanban.errors import ValidationError
from kanban.models import ActivityAction, Board, BoardColumn
from kanban.schemas.activity import CardMovedMetadata
from kanban.services import activity, positions
from kanban.services.loaders import load_board, load_column, ordered_cards, ordered_columns

logger = logging.getLogger(__name__)


def create_default_columns(db: Session, board: Board, names: List[str]) -> List[BoardColumn]:
    columns = [BoardColumn(board_id=board.id, name=name, position=index) for index, name in enumerate(names)]
    db.add_all(columns)
    db.flush()
    return columns


def create_column(db: Session, board_id: int, name: str) -> BoardColumn:
    """Append a column after the board's last one."""
    board = load_board(db, board_id)
    max_position = (
        db.query(func.max(BoardColumn.position)).filter(BoardColumn.board_id == board.id).scalar()
    )
    column = BoardColumn(board_id=board.id, name=name, position=(-1 if max_position is None else max_position) + 1)
    db.add(column)
    db.flush()
    return column


def delete_column(
    db: Session,
    column_id: int,
    move_cards_to: Optional[int] = None,
    actor_id: Optional[int] = None,
) -> None:
    """Delete a column, optionally rescuing its cards first.

    Rescued cards keep their relative order and are appended to the end of
    ``move_cards_to``, which must be another column of the same board. The
    board's remaining columns are renumbered.
    """
    column = load_column(db, column_id)
    board_id = column.board_id

    if move_cards_to is not None:
        target = load_column(db, move_cards_to)
        if target.board_id != board_id:
            raise ValidationError("Cards can only move between columns of the same board")
        if target.id == column.id:
            raise ValidationError("Cannot move cards into the column being deleted")

        rescued = ordered_cards(db, column.id)
        offset = len(ordered_cards(db, target.id))
        for index, card in enumerate(rescued):
            card.column_id = target.id
            card.position = offset + index
            activity.record(
                db,
                board_id=board_id,
                action=ActivityAction.CARD_MOVED,
                metadata=CardMovedMetadata(from_column=column.name, to_column=target.name),
                card_id=card.id,
                user_id=actor_id,
            )
        db.flush()
        db.expire(column, ["cards"])
        logger.info("Moved %d cards from column %s to column %s", len(rescued), column.id, target.id)

    remaining = positions.remove(ordered_columns(db, board_id), column)
    db.delete(column)
    db.flush()
    positions.renumber(db, remaining)
