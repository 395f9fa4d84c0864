"""Dense ordering of sibling entities.

Columns are ordered within their board and cards within their column. The
positions of a parent's children are always exactly ``0..n-1``. The helpers in
the first half of this module are pure list arithmetic; ``renumber`` is the one
place that writes positions to the database.
"""
import logging
from typing import Dict, Hashable, List, Sequence, TypeVar

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def clamp(index: int, upper: int) -> int:
    """Clamp ``index`` into ``[0, upper]``."""
    return max(0, min(index, upper))


def dense_positions(ordered_ids: Sequence[T]) -> Dict[T, int]:
    """Map every id to its index in ``ordered_ids``."""
    return {item_id: index for index, item_id in enumerate(ordered_ids)}


def relocate(ordered_ids: Sequence[T], item_id: T, target_index: int) -> List[T]:
    """Return the order with ``item_id`` moved to ``target_index``.

    The index is clamped to ``[0, len - 1]``; ``item_id`` must already be in
    the list.
    """
    remaining = [other for other in ordered_ids if other != item_id]
    remaining.insert(clamp(target_index, len(remaining)), item_id)
    return remaining


def insert_at(ordered_ids: Sequence[T], item_id: T, target_index: int) -> List[T]:
    """Return the order with ``item_id`` inserted at ``target_index`` (clamped to ``[0, len]``)."""
    result = list(ordered_ids)
    result.insert(clamp(target_index, len(result)), item_id)
    return result


def remove(ordered_ids: Sequence[T], item_id: T) -> List[T]:
    """Return the order without ``item_id``, closing the gap it leaves."""
    return [other for other in ordered_ids if other != item_id]


def renumber(db: Session, *scopes: Sequence) -> None:
    """Write position ``i`` to the entity at index ``i`` of each scope.

    Each scope is the complete, current child list of one parent, in the
    desired order. ``(parent, position)`` is unique and checked per statement,
    so every row is first parked on a distinct negative position and only then
    settled on its final index; a row never passes through a value still held
    by a sibling. A cross-column move passes both columns in one call, with the
    moved card already pointing at its new column.

    The caller owns the surrounding transaction.
    """
    scopes = [scope for scope in scopes if scope]
    if not scopes:
        return

    targets = [dense_positions(scope) for scope in scopes]
    if all(entity.position == index for target in targets for entity, index in target.items()):
        return

    for target in targets:
        for entity, index in target.items():
            entity.position = -(index + 1)
    db.flush()

    for target in targets:
        for entity, index in target.items():
            entity.position = index
    db.flush()
    logger.debug("Renumbered %s", ", ".join(f"{len(scope)} {type(scope[0]).__name__} rows" for scope in scopes))
