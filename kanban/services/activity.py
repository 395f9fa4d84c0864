"""Activity recorder: the only writer of the activity log."""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from kanban.config import settings
from kanban.models import ActivityAction, ActivityLogEntry
from kanban.schemas.activity import (
    METADATA_BY_ACTION,
    ActivityEntryResponse,
    ActivityMetadata,
    CommentAddedMetadata,
    EmptyMetadata,
)

logger = logging.getLogger(__name__)


def record(
    db: Session,
    board_id: int,
    action: ActivityAction,
    metadata: Optional[ActivityMetadata] = None,
    card_id: Optional[int] = None,
    user_id: Optional[int] = None,
) -> ActivityLogEntry:
    """Append one entry to the activity log inside the caller's transaction.

    ``metadata`` must be the payload type of ``action``; create and delete
    entries may omit it.
    """
    if metadata is None:
        metadata = EmptyMetadata()

    expected = METADATA_BY_ACTION[action]
    if type(metadata) is not expected:
        raise TypeError(f"{action.value} expects {expected.__name__}, got {type(metadata).__name__}")

    entry = ActivityLogEntry(
        board_id=board_id,
        card_id=card_id,
        user_id=user_id,
        action=action.value,
        meta=metadata.model_dump(by_alias=True),
    )
    db.add(entry)
    logger.debug("Recorded %s on board %s (card %s)", action.value, board_id, card_id)
    return entry


def parse_metadata(action: ActivityAction, payload: Optional[Dict[str, Any]]) -> ActivityMetadata:
    return METADATA_BY_ACTION[action].model_validate(payload or {})


def comment_preview(content: str, limit: Optional[int] = None) -> CommentAddedMetadata:
    """Build the bounded excerpt stored for a new comment."""
    limit = limit or settings.COMMENT_PREVIEW_LENGTH
    text = " ".join(content.split())
    if len(text) > limit:
        text = text[: max(limit - 1, 0)].rstrip() + "…"
    return CommentAddedMetadata(comment_preview=text)


def list_activity(
    db: Session,
    board_id: int,
    card_id: Optional[int] = None,
    limit: int = 50,
) -> List[ActivityEntryResponse]:
    """Newest entries first."""
    query = db.query(ActivityLogEntry).filter(ActivityLogEntry.board_id == board_id)
    if card_id is not None:
        query = query.filter(ActivityLogEntry.card_id == card_id)

    entries = query.order_by(ActivityLogEntry.created_at.desc(), ActivityLogEntry.id.desc()).limit(limit).all()
    return [serialize_entry(entry) for entry in entries]


def serialize_entry(entry: ActivityLogEntry) -> ActivityEntryResponse:
    action = ActivityAction(entry.action)
    return ActivityEntryResponse(
        id=entry.id,
        board_id=entry.board_id,
        card_id=entry.card_id,
        user_id=entry.user_id,
        action=action,
        metadata=parse_metadata(action, entry.meta),
        created_at=entry.created_at,
    )
