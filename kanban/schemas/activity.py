"""Activity log payloads.

Each action kind has exactly one metadata shape; the action is the tag of the
variant, so the payload itself stores no discriminator. Keys are stored in
camelCase.
"""
from datetime import datetime
from typing import Dict, Optional, Type, Union

from pydantic import BaseModel, Field

from kanban.models.activity_log import ActivityAction


class _Metadata(BaseModel):
    class Config:
        populate_by_name = True
        frozen = True
        extra = "forbid"


class CardMovedMetadata(_Metadata):
    from_column: str = Field(..., alias="fromColumn")
    to_column: str = Field(..., alias="toColumn")


class FieldChangedMetadata(_Metadata):
    field: str
    old_value: Optional[str] = Field(default=None, alias="oldValue")
    new_value: Optional[str] = Field(default=None, alias="newValue")


class CommentAddedMetadata(_Metadata):
    comment_preview: str = Field(..., alias="commentPreview")


class EmptyMetadata(_Metadata):
    pass


ActivityMetadata = Union[CardMovedMetadata, FieldChangedMetadata, CommentAddedMetadata, EmptyMetadata]

METADATA_BY_ACTION: Dict[ActivityAction, Type[_Metadata]] = {
    ActivityAction.CARD_CREATED: EmptyMetadata,
    ActivityAction.CARD_MOVED: CardMovedMetadata,
    ActivityAction.CARD_UPDATED: FieldChangedMetadata,
    ActivityAction.CARD_DELETED: EmptyMetadata,
    ActivityAction.COMMENT_ADDED: CommentAddedMetadata,
}


class ActivityEntryResponse(BaseModel):
    id: int
    board_id: int
    card_id: Optional[int]
    user_id: Optional[int]
    action: ActivityAction
    metadata: ActivityMetadata
    created_at: datetime
