"""
Pydantic schemas for request/response validation
"""
from kanban.schemas.user import UserCreate, UserResponse, UserSummary
from kanban.schemas.label import LabelCreate, LabelUpdate, LabelRef, LabelResponse, CardLabelToggleResponse
from kanban.schemas.comment import CommentCreate, CommentUpdate, CommentResponse
from kanban.schemas.card import CardCreate, CardUpdate, CardReorder, BoardCard, CardColumnRef, CardDetail
from kanban.schemas.column import (
    ColumnCreate,
    ColumnRename,
    WipLimitUpdate,
    ColumnReorder,
    ColumnRef,
    ColumnResponse,
    ColumnWithCards,
)
from kanban.schemas.board import BoardCreate, BoardRename, BoardDescriptionUpdate, BoardSummary, BoardResponse
from kanban.schemas.activity import (
    ActivityMetadata,
    CardMovedMetadata,
    FieldChangedMetadata,
    CommentAddedMetadata,
    EmptyMetadata,
    ActivityEntryResponse,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "UserSummary",
    "LabelCreate",
    "LabelUpdate",
    "LabelRef",
    "LabelResponse",
    "CardLabelToggleResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "CardCreate",
    "CardUpdate",
    "CardReorder",
    "BoardCard",
    "CardColumnRef",
    "CardDetail",
    "ColumnCreate",
    "ColumnRename",
    "WipLimitUpdate",
    "ColumnReorder",
    "ColumnRef",
    "ColumnResponse",
    "ColumnWithCards",
    "BoardCreate",
    "BoardRename",
    "BoardDescriptionUpdate",
    "BoardSummary",
    "BoardResponse",
    "ActivityMetadata",
    "CardMovedMetadata",
    "FieldChangedMetadata",
    "CommentAddedMetadata",
    "EmptyMetadata",
    "ActivityEntryResponse",
]
